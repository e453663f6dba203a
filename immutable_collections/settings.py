import contextlib
import os

from immutable_collections import exceptions, utils


TRUTHY_VALUES = ('1', 'true', 'yes', 'on')
FALSEY_VALUES = ('0', 'false', 'no', 'off', '')


class SettingsError(exceptions.InvalidParamError):
    prefix = None
    content = [
        "There was a settings error.",
        "The setting {humanized_param} is invalid.",
        "The setting {humanized_param} received invalid value "
        "{humanized_value}.",
    ]


class SettingLookupError(SettingsError):
    required_on_init = ['param']
    content = ["The setting {humanized_param} does not exist."]


def to_bool(value):
    """
    Coerces a boolean or a string flag, as it would be provided through an
    environment variable, to a :obj:`bool`.
    """
    if isinstance(value, bool):
        return value
    elif isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUTHY_VALUES:
            return True
        elif normalized in FALSEY_VALUES:
            return False
    humanized = utils.humanize_list(
        TRUTHY_VALUES + FALSEY_VALUES, callback=repr, conjunction='or')
    raise ValueError(
        f"Expected a boolean or one of {humanized}, received {value!r}.")


class Setting(exceptions.FormattableModelMixin):
    """
    A descriptor that represents a single setting of the :obj:`Settings`
    object, along with the configuration of how the value is defaulted,
    validated and read from the environment.

    The value of the setting is determined based on the following order of
    precedence:

    (1) The value was set on the :obj:`Settings` instance, either directly or
        inside of :obj:`Settings.override`.
    (2) The environment variable associated with the setting is defined.
    (3) The default value of the setting.

    Parameters:
    ----------
    param: :obj:`str`
        The name of the setting.

    default: (optional)
        The value used when the setting is neither set nor defined in the
        environment.

        Default: None

    env: :obj:`str` (optional)
        The name of the environment variable that the setting can be read
        from.

        Default: None

    formatter: :obj:`lambda` or :obj:`list` or :obj:`tuple` (optional)
        The formatters that validate and coerce a raw value.  A formatter that
        raises :obj:`TypeError` or :obj:`ValueError` marks the value as
        invalid.

        Default: None
    """
    def __init__(self, param, default=None, env=None, **kwargs):
        self._param = param
        self._default = default
        self._env = env
        kwargs.setdefault('format_null_values', True)
        super().__init__(**kwargs)

    @property
    def param(self):
        return self._param

    @property
    def env(self):
        return self._env

    @property
    def default(self):
        return self._default

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        elif self.param in instance._overrides:
            return instance._overrides[self.param]
        elif self.env is not None and self.env in os.environ:
            return self.parse(os.environ[self.env])
        return self.default

    def __set__(self, instance, value):
        instance._overrides[self.param] = self.parse(value)

    def parse(self, value):
        try:
            return self.format(value)
        except (TypeError, ValueError) as e:
            raise SettingsError(param=self.param, value=value) from e


class Settings:
    """
    The runtime configuration of the package.

    >>> from immutable_collections.settings import settings
    >>> with settings.override(warn_on_duplicate_keys=True):
    >>>     ImmutableMap.of(("1", "A"), ("1", "B"))
    """
    warn_on_duplicate_keys = Setting(
        param='warn_on_duplicate_keys',
        default=False,
        env='IMMUTABLE_COLLECTIONS_WARN_ON_DUPLICATE_KEYS',
        formatter=to_bool,
    )

    def __init__(self):
        self._overrides = {}

    def __repr__(self):
        humanized = utils.humanize_dict(
            {s.param: getattr(self, s.param) for s in self.settings()})
        return f"<{self.__class__.__name__} {humanized}>"

    @classmethod
    def settings(cls):
        return [
            v for v in vars(cls).values()
            if isinstance(v, Setting)
        ]

    @classmethod
    def get_setting(cls, param):
        for setting in cls.settings():
            if setting.param == param:
                return setting
        raise SettingLookupError(param=param)

    def reset(self):
        self._overrides = {}

    @contextlib.contextmanager
    def override(self, **values):
        for param in values:
            self.get_setting(param)
        previous = dict(self._overrides)
        try:
            for param, value in values.items():
                setattr(self, param, value)
            yield self
        finally:
            self._overrides = previous


settings = Settings()
