from immutable_collections import utils


class Formatter:
    """
    Wraps a callback that builds the formatting functions for a value from a
    context object, for formatting that depends on more than the value, i.e.
    choosing an exception message based on the exception instance:

    >>> ExceptionAttribute(
    >>>     name='content',
    >>>     formatter=Formatter(lambda instance: functools.partial(
    >>>         utils.conditionally_format_string, obj=instance))
    >>> )
    """
    def __init__(self, func):
        self._func = func

    def __call__(self, value, *context):
        for func in utils.ensure_iterable(self._func(*context)):
            value = func(value)
        return value
