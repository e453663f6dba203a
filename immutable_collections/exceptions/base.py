import functools

from immutable_collections import utils

from .meta import ExceptionMetaClass
from .models import StringFormatChoices, Formatter, ExceptionAttribute


def candidate_formatter():
    """
    Returns a :obj:`Formatter` that reduces a string, or an iterable of
    candidate strings and :obj:`StringFormatChoices`, to the single candidate
    best satisfied by the exception instance and formats it.
    """
    return Formatter(lambda instance: [
        utils.ensure_iterable,
        StringFormatChoices.flattener(instance),
        functools.partial(utils.conditionally_format_string, obj=instance)
    ])


class AbstractException(Exception, metaclass=ExceptionMetaClass):
    """
    Abstract base class for the exceptions of this package.  It is never
    raised directly.

    The values an exception reports are declared as :obj:`ExceptionAttribute`
    instances in `attributes`.  Each one can be provided on initialization,
    defined statically on the class (as a plain value or an @property) or
    defaulted through a `default_<name>` class attribute, in that order of
    precedence.

    Parameters:
    ----------
    content: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        The message, or candidate messages, of the exception.  Provided on
        initialization as `message`.  Format arguments refer to attributes of
        the instance, and the candidate whose arguments are best satisfied is
        rendered:

        >>> content = [
        >>>     "Duplicate key {key} (attempted merging values {value} and "
        >>>     "{other_value}).",
        >>>     "Duplicate key {key}.",
        >>> ]

        Default: None

    prefix: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        Rendered in front of the `content`, chosen in the same manner.

        Default: None

    detail: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        Additional lines rendered after the message, each behind the
        `detail_indent`.

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='detail', formatter=utils.ensure_iterable),
        ExceptionAttribute(name='detail_indent', default="--> "),
        ExceptionAttribute(
            name='content',
            accessor='message',
            formatter=candidate_formatter()
        ),
        ExceptionAttribute(name='prefix', formatter=candidate_formatter()),
    ]

    def __init__(self, **kwargs):
        required_attrs_on_init = getattr(self, 'required_on_init', [])
        for attr in self.attributes:
            if attr.accessor in required_attrs_on_init \
                    and kwargs.get(attr.accessor, None) is None:
                raise TypeError(
                    f"The parameter {attr.accessor} is required to initialize "
                    f"the exception class {self.__class__}."
                )
            setattr(self, f'_{attr.name}', kwargs.pop(attr.accessor, None))
        super().__init__()

    @property
    def message(self):
        head = self.content
        if self.prefix is not None:
            prefix = self.prefix.rstrip(".:")
            head = f"{prefix}." if head is None else f"{prefix}: {head}"
        lines = [head or ""]
        for detail in self.detail or []:
            lines.append(utils.cjoin(
                self.detail_indent,
                utils.conditionally_format_string(detail, self),
                delimiter=""
            ))
        return "\n".join(lines)

    def __str__(self):
        return self.message
