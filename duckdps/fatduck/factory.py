"""Shared FatDuck client factory: one httpx pool for every request."""

import httpx

from duckdps.fatduck.client import FatDuckClient


class FatDuckFactory:
    """Creates FatDuckClient instances that share one HTTP connection pool."""

    def __init__(self, settings) -> None:
        self._telemetry_url = settings.telemetry.base_url
        self._lookup_url = settings.lookup.base_url
        self._telemetry_timeout = settings.telemetry.timeout
        self._lookup_timeout = settings.lookup.timeout
        self._pool: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Open the shared HTTP connection pool."""
        self._pool = httpx.AsyncClient()

    async def stop(self) -> None:
        """Close the shared HTTP connection pool."""
        if self._pool:
            await self._pool.aclose()
            self._pool = None

    def __call__(self) -> FatDuckClient:
        """Return a FatDuckClient bound to this factory's pool."""
        return FatDuckClient(
            telemetry_url=self._telemetry_url,
            lookup_url=self._lookup_url,
            telemetry_timeout=self._telemetry_timeout,
            lookup_timeout=self._lookup_timeout,
            http_client=self._pool,
        )
