from unittest.mock import MagicMock

from duckdps.fatduck.factory import FatDuckFactory


def _mock_settings():
    settings = MagicMock()
    settings.telemetry.base_url = "https://example.com/api/v2"
    settings.telemetry.timeout = 30.0
    settings.lookup.base_url = "https://lookup.example.com/skilltable"
    settings.lookup.timeout = 10.0
    return settings


class TestFatDuckFactory:
    async def test_factory_shares_http_pool(self):
        """Clients share the factory's HTTP connection pool."""
        factory = FatDuckFactory(_mock_settings())
        await factory.start()
        try:
            client_a = factory()
            client_b = factory()
            assert client_a._http is factory._pool
            assert client_b._http is factory._pool
            assert not client_a._owns_http
        finally:
            await factory.stop()

    async def test_factory_lifecycle(self):
        """start() creates pool, stop() closes it."""
        factory = FatDuckFactory(_mock_settings())
        assert factory._pool is None

        await factory.start()
        assert factory._pool is not None
        pool = factory._pool

        await factory.stop()
        assert factory._pool is None
        assert pool.is_closed

    def test_factory_passes_settings(self):
        client = FatDuckFactory(_mock_settings())()
        assert client._telemetry_url == "https://example.com/api/v2"
        assert client._lookup_url == "https://lookup.example.com/skilltable"
        assert client._lookup_timeout == 10.0

    def test_factory_without_start_owns_http(self):
        """Factory before start() creates clients that own their own HTTP pool."""
        client = FatDuckFactory(_mock_settings())()
        assert client._http is None
        assert client._owns_http
