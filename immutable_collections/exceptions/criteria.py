from immutable_collections import utils

from .base import AbstractException
from .exceptions import InvalidParamError, RequiredParamError
from .models import ExcParams


class Criteria(ExcParams):
    """
    A single condition that an instance must meet for a method decorated
    with :obj:`check_instance` to run.

    >>> Criteria(attr='is_mutable', default_value=False)
    >>> Criteria(func=lambda accumulation: not accumulation.sealed)

    Parameters:
    ----------
    func: :obj:`lambda` (optional)
        Takes the instance and returns True when the condition is met.
        Returning False, or a :obj:`str` that is then used as the message of
        the raised exception, means the condition is not met.

        Required if `attr` is not provided.

        Default: None

    attr: :obj:`str` (optional)
        The attribute of the instance that must equal `value`.

        Required if `func` is not provided.

        Default: None

    value (optional)
        The value that `attr` must equal.

        Default: True

    default_value (optional)
        The value used for `attr` when the instance does not define it.  When
        not provided, a missing attribute raises :obj:`InvalidParamError`.
    """
    def __init__(self, func=None, attr=None, value=True,
            default_value=utils.empty, **kwargs):
        if func is None and attr is None:
            raise RequiredParamError(
                param=['func', 'attr'],
                conjunction='or',
                klass=self.__class__
            )
        self._func = func
        self._attr = attr
        self._value = value
        self._default_value = default_value
        super().__init__(**kwargs)

    def __call__(self, instance, strict=True):
        if self._func is not None:
            result = self._func(instance)
            if result is False or isinstance(result, str):
                message = result if isinstance(result, str) else None
                return self.failed(instance, strict=strict, message=message)
            return True
        elif self.get_instance_value(instance) != self._value:
            return self.failed(instance, strict=strict)
        return True

    def get_instance_value(self, instance):
        if self._default_value is not utils.empty:
            return getattr(instance, self._attr, self._default_value)
        elif not hasattr(instance, self._attr):
            raise InvalidParamError(
                param='attr',
                message=(
                    f'The {utils.obj_name(instance)} does not have an '
                    f'attribute {self._attr}.'
                )
            )
        return getattr(instance, self._attr)

    def failed(self, instance, strict=True, message=None):
        if strict:
            self.raise_exception(instance, message=message)
        return None

    def raise_exception(self, instance, message=None):
        exc_cls = self.exc_cls
        message = self.exc_message(instance, message=message)
        if issubclass(exc_cls, AbstractException):
            # Exceptions of this package render their own message from their
            # keyword arguments unless one is provided explicitly.
            exc_kwargs = self.exc_kwargs(instance)
            if message is not None:
                exc_kwargs.update(message=message)
            raise exc_cls(**exc_kwargs)
        elif message is None:
            message = (
                f"The {utils.obj_name(instance)} does not meet the criteria "
                f"for this operation."
            )
            if self._attr is not None:
                message = (
                    f"The value of attribute {self._attr} on the "
                    f"{utils.obj_name(instance)} instance does not equal "
                    f"{self._value}."
                )
        raise exc_cls(message)

    def provide_missing_values(self, decorator):
        """
        Adopts the exception configuration of the :obj:`check_instance` the
        criteria belongs to, for each value the criteria does not define.
        """
        for k in self.attrs:
            if getattr(self, f"_{k}") is None:
                setattr(self, f"_{k}", getattr(decorator, f"_{k}"))
