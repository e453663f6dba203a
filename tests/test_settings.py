import pytest

from immutable_collections.settings import (
    Settings, SettingLookupError, SettingsError, settings, to_bool)


class TestToBool:
    @pytest.mark.parametrize("value", [True, "1", "true", "Yes", " on "])
    def test_truthy(self, value):
        assert to_bool(value) is True

    @pytest.mark.parametrize("value", [False, "0", "false", "NO", "off", ""])
    def test_falsey(self, value):
        assert to_bool(value) is False

    @pytest.mark.parametrize("value", ["maybe", 2, None])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            to_bool(value)


class TestSettings:
    def test_default(self):
        assert settings.warn_on_duplicate_keys is False

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(
            "IMMUTABLE_COLLECTIONS_WARN_ON_DUPLICATE_KEYS", "yes")
        assert settings.warn_on_duplicate_keys is True

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv(
            "IMMUTABLE_COLLECTIONS_WARN_ON_DUPLICATE_KEYS", "maybe")
        with pytest.raises(SettingsError) as exc_info:
            settings.warn_on_duplicate_keys
        assert str(exc_info.value) == (
            "The setting warn_on_duplicate_keys received invalid value "
            "'maybe'."
        )

    def test_set_takes_precedence_over_environment(self, monkeypatch):
        monkeypatch.setenv("IMMUTABLE_COLLECTIONS_WARN_ON_DUPLICATE_KEYS", "1")
        settings.warn_on_duplicate_keys = "off"
        assert settings.warn_on_duplicate_keys is False
        settings.reset()
        assert settings.warn_on_duplicate_keys is True

    def test_override_restores(self):
        with settings.override(warn_on_duplicate_keys=True) as overridden:
            assert overridden.warn_on_duplicate_keys is True
        assert settings.warn_on_duplicate_keys is False

    def test_override_restores_after_error(self):
        with pytest.raises(RuntimeError):
            with settings.override(warn_on_duplicate_keys=True):
                raise RuntimeError()
        assert settings.warn_on_duplicate_keys is False

    def test_override_rejects_unknown_setting(self):
        with pytest.raises(SettingLookupError, match="does not exist"):
            with settings.override(unknown=True):
                pass

    def test_override_rejects_invalid_value(self):
        with pytest.raises(SettingsError):
            with settings.override(warn_on_duplicate_keys="maybe"):
                pass
        assert settings.warn_on_duplicate_keys is False

    def test_repr(self):
        assert repr(Settings()) == "<Settings warn_on_duplicate_keys=False>"
