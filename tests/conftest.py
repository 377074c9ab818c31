import pytest

from anilist_mcp.config import get_settings

_ENV = ("ANILIST_GQL_URL", "ANILIST_TIMEOUT_S", "ANILIST_DEDUPE_RECOMMENDATIONS", "ANILIST_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    # settings are memoized per process; start every test from the defaults
    for k in _ENV:
        monkeypatch.delenv(k, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
