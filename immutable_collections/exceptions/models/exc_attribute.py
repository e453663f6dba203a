from .mixins import FormattableModelMixin


class ExceptionAttribute(FormattableModelMixin):
    """
    Declares a value that an :obj:`AbstractException` reports, i.e. the
    `operation` of a :obj:`FixedCapacityError` or the `key` of a
    :obj:`DuplicateKeyError`.

    Parameters:
    ----------
    name: :obj:`str`
        The name of the @property the value is exposed as.

    accessor: :obj:`str` (optional)
        The keyword argument the value is provided as on initialization, when
        it differs from `name`.

        Default: None

    default: (optional)
        The value used when none is provided or defined on the class.

        Default: None
    """
    def __init__(self, name, accessor=None, default=None, **kwargs):
        self._name = name
        self._accessor = accessor
        self._default = default
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._name}>"

    @property
    def name(self):
        return self._name

    @property
    def default(self):
        return self._default

    @property
    def accessor(self):
        return self._accessor or self._name
