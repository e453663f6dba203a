import pytest

from immutable_collections.settings import settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    monkeypatch.delenv(
        "IMMUTABLE_COLLECTIONS_WARN_ON_DUPLICATE_KEYS", raising=False)
    settings.reset()
    yield
    settings.reset()
