"""Shared fixtures for the whatsnew test suite."""

import pytest

from whatsnew.config.config_manager import ENV_TO_INFO_KEY, LAST_SEEN_VERSION_VAR, ConfigManager


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh config singleton and an environment without whatsnew variables."""
    for var in list(ENV_TO_INFO_KEY) + [LAST_SEEN_VERSION_VAR]:
        monkeypatch.delenv(var, raising=False)
    ConfigManager.reset()
    yield
    ConfigManager.reset()
