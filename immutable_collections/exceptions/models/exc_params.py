from immutable_collections import utils


class ExcParams:
    """
    Base class for objects that build and raise an exception when a check
    they perform fails.

    Parameters:
    ----------
    exc_cls: :obj:`type` (optional)
        The class of the raised exception.

        Default: TypeError

    exc_message: :obj:`str` or :obj:`lambda` (optional)
        The message of the raised exception, or a callback that takes the
        checked instance and returns it.

        Default: None

    exc_kwargs: :obj:`dict` or :obj:`lambda` (optional)
        Keyword arguments of the raised exception, or a callback that takes
        the checked instance and returns them.  Only applies to exceptions of
        this package.

        Default: None
    """
    attrs = ('exc_cls', 'exc_kwargs', 'exc_message')

    def __init__(self, exc_cls=None, exc_kwargs=None, exc_message=None):
        self._exc_cls = exc_cls
        self._exc_kwargs = exc_kwargs
        self._exc_message = exc_message

    @property
    def exc_cls(self):
        return self._exc_cls or TypeError

    def exc_kwargs(self, instance):
        if self._exc_kwargs is None:
            return {}
        elif utils.is_function(self._exc_kwargs):
            return dict(self._exc_kwargs(instance))
        return dict(self._exc_kwargs)

    def exc_message(self, instance, message=None):
        # A message returned by the check itself takes precedence.
        if message is not None:
            return message
        elif utils.is_function(self._exc_message):
            return self._exc_message(instance)
        return self._exc_message
