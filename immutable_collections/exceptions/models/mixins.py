from immutable_collections import utils

from .formatter import Formatter


class FormattableModelMixin:
    """
    Gives a model a chain of formatters that validate or coerce the values it
    is handed, shared by :obj:`ExceptionAttribute` and the :obj:`Setting`
    descriptor.

    Parameters:
    ----------
    formatter: :obj:`lambda` or :obj:`Formatter` or :obj:`list` or :obj:`tuple`
        One formatter or several, applied in order.  A plain function receives
        the value only, whereas a :obj:`Formatter` also receives the context
        passed to `format`.

        Default: None

    format_null_values: :obj:`bool` (optional)
        Whether or not None is passed through the formatters.

        Default: False
    """
    def __init__(self, formatter=None, format_null_values=False):
        self._formatter = formatter
        self._format_null_values = format_null_values

    @property
    def format_null_values(self):
        return self._format_null_values

    @property
    def formatter(self):
        return utils.ensure_iterable(self._formatter)

    def format(self, value, *context):
        if value is None and not self.format_null_values:
            return value
        for fmt in self.formatter:
            if isinstance(fmt, Formatter):
                value = fmt(value, *context)
            else:
                value = fmt(value)
        return value
