import functools

from immutable_collections import utils

from .exceptions import InvalidParamError
from .models import ExcParams


__all__ = ('check_instance', )


class check_instance(ExcParams):
    """
    A decorator factory whose decorators only let a method, or a property,
    run when the instance it is called on meets every :obj:`Criteria`.  The
    first unmet :obj:`Criteria` raises its exception instead.

    >>> ensure_unsealed = check_instance(
    >>>     exc_cls=AccumulationSealedError,
    >>>     criteria=[Criteria(attr='sealed', value=False)]
    >>> )

    (1) Decorating a method:

        >>> class Accumulation:
        >>>     @ensure_unsealed
        >>>     def seal(self):
        >>>         ...

    (2) Decorating a property:

        >>> class Accumulation:
        >>>     @ensure_unsealed(is_property=True)
        >>>     def buffer(self):
        >>>         ...

    (3) Evaluating an instance directly:

        >>> ensure_unsealed(accumulation)

    Parameters:
    ----------
    criteria: :obj:`list` or :obj:`tuple` or :obj:`Criteria`
        The :obj:`Criteria` to evaluate, provided positionally or as the
        `criteria` keyword argument.  The `exc_cls`, `exc_kwargs` and
        `exc_message` of the decorator apply to any :obj:`Criteria` that does
        not define its own.
    """
    def __init__(self, *criteria, **kwargs):
        if 'criteria' in kwargs:
            criteria = kwargs.pop('criteria')
        self._criteria = utils.ensure_iterable(criteria)
        if len(self._criteria) == 0:
            raise InvalidParamError(
                param='criteria',
                message='At least 1 criteria must be provided.'
            )
        super().__init__(**kwargs)
        for c in self._criteria:
            c.provide_missing_values(self)

    def __call__(self, *args, **kwargs):
        if len(args) == 1 and utils.is_function(args[0]):
            return self.inner_factory(args[0])
        elif len(args) == 1:
            return self.evaluate(args[0], **kwargs)
        return self.decorator_factory(**kwargs)

    def evaluate(self, instance, strict=True):
        """
        Returns True when the instance meets every :obj:`Criteria`.  When
        `strict` is False, an unmet :obj:`Criteria` returns None instead of
        raising.
        """
        for c in self._criteria:
            result = c(instance, strict=strict)
            if result is not True:
                return result
        return True

    def inner_factory(self, func, is_property=False):
        @functools.wraps(func)
        def inner(instance, *args, **kwargs):
            self.evaluate(instance)
            return func(instance, *args, **kwargs)
        if is_property:
            return property(inner)
        return inner

    def decorator_factory(self, is_property=False):
        return functools.partial(self.inner_factory, is_property=is_property)
