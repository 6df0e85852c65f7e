import pytest
from tenacity import wait_none

from duckdps.config import get_settings
from duckdps.fatduck.client import FatDuckClient


@pytest.fixture(autouse=True)
def _no_retry_wait(monkeypatch):
    """Retry immediately instead of backing off between attempts."""
    monkeypatch.setattr(FatDuckClient._get.retry, "wait", wait_none())


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
