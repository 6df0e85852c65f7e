"""Shared fixtures for API route tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from duckdps.api.app import create_app
from duckdps.api.deps import get_fatduck_factory
from duckdps.fatduck.client import FatDuckClient


@pytest.fixture
def app():
    app = create_app()
    # Each request gets a client owning its own pool; respx intercepts it.
    app.dependency_overrides[get_fatduck_factory] = lambda: FatDuckClient
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
