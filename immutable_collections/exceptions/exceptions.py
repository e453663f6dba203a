from immutable_collections import utils

from .base import AbstractException
from .models import StringFormatChoices, ExceptionAttribute


class ImmutableCollectionsError(AbstractException):
    """
    Root of every exception raised by this package, so callers can catch
    container, collector and configuration errors with a single clause.
    """


class ImproperUsageError(ImmutableCollectionsError):
    """
    Raised when a factory, collector or other callable of this package is
    called with arguments it cannot work with.  Nothing has been built when
    this error is raised.

    Parameters:
    -----------
    klass: :obj:`str`, :obj:`type` or :obj:`object` (optional)
        The class whose initialization was improper, i.e. :obj:`ImmutableMap`.

        Default: None

    func: :obj:`str` or :obj:`lambda` (optional)
        The callable that was improperly used, i.e. "ImmutableList.of".

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='klass', formatter=utils.obj_name),
        ExceptionAttribute(name='func', formatter=utils.obj_name)
    ]
    prefix = [
        StringFormatChoices(
            func=lambda instance: instance.klass is not None
            or instance.func is not None,
            isolated=True,
            choices=[
                "Improper initialization of class {klass}.",
                "Improper usage of method {func}.",
            ]
        )
    ]


class ParamError(ImproperUsageError):
    """
    Raised when one or more named parameters are the cause of an
    :obj:`ImproperUsageError`.

    Parameters:
    ----------
    param: :obj:`str`, :obj:`tuple` or :obj`list` (optional)
        The name or names of the offending parameters.

        Default: None

    conjunction: :obj:`str` (optional)
        Joins several parameter names in the message, "or" when any one of
        them would have sufficed.

        Default: "and"
    """
    attributes = [
        ExceptionAttribute(
            name='param',
            formatter=utils.ensure_iterable,
            format_null_values=True
        ),
        ExceptionAttribute(name='conjunction', default="and"),
    ]

    @property
    def humanized_param(self):
        if len(self.param) == 0:
            return None
        elif len(self.param) == 1:
            return self.param[0]
        return utils.humanize_list(self.param, conjunction=self.conjunction)


class RequiredParamError(ParamError):
    """
    Raised when a required parameter is missing or None, i.e. the first item
    of :obj:`ImmutableList.of`.
    """
    @property
    def content(self):
        if len(self.param) == 0:
            return "A required parameter is missing."
        elif len(self.param) == 1:
            return "The parameter `{humanized_param}` is required."
        elif self.conjunction == 'or':
            return "One of the parameters {humanized_param} is required."
        return "All of the parameters {humanized_param} are required."


class InvalidParamError(ParamError):
    """
    Raised when a parameter is provided but cannot be used, i.e. a value that
    is not iterable where an iterable is expected.

    Parameters:
    ----------
    value: (optional)
        The offending value.  None is treated as no value being reported.

        Default: None

    valid_types: :obj:`type` or :obj:`tuple` or :obj:`list` (optional)
        The types the parameter was expected to be of.

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='value'),
        ExceptionAttribute(
            name='valid_types',
            formatter=utils.ensure_iterable,
            format_null_values=True,
        ),
    ]
    content = [
        StringFormatChoices(
            func=lambda instance: instance.value is None,
            isolated=True,
            choices=[
                "Received an invalid value.",
                "Received an invalid value for parameter {humanized_param}.",
                "Received an invalid value for parameter {humanized_param}, "
                "expected {humanized_valid_types}.",
            ]
        ),
        "Received invalid value {humanized_value}.",
        "Received invalid value {humanized_value} for parameter "
        "{humanized_param}.",
        "Received invalid value {humanized_value} for parameter "
        "{humanized_param}, expected {humanized_valid_types}.",
    ]

    @property
    def humanized_value(self):
        if self.value is None:
            return None
        return repr(self.value)

    @property
    def humanized_valid_types(self):
        if len(self.valid_types) == 0:
            return None
        return utils.humanize_list(
            self.valid_types, callback=utils.obj_name, conjunction="or")
