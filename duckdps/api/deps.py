"""FastAPI dependency injection providers."""

import hmac

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyHeader, APIKeyQuery

from duckdps.config import get_settings

# Set during lifespan, read by Depends()
_fatduck_factory = None


def set_fatduck_factory(factory) -> None:
    """Called once during app lifespan startup."""
    global _fatduck_factory
    _fatduck_factory = factory


def get_fatduck_factory():
    """FastAPI dependency -- returns the shared FatDuck client factory."""
    if _fatduck_factory is None:
        raise RuntimeError("FatDuck factory not initialized")
    return _fatduck_factory


# Auth dependencies
_header_scheme = APIKeyHeader(name="X-API-Key", auto_error=False)
_query_scheme = APIKeyQuery(name="api_key", auto_error=False)


async def verify_api_key(
    header_key: str | None = Depends(_header_scheme),
    query_key: str | None = Depends(_query_scheme),
) -> None:
    """Rejects requests when API key is configured but not provided."""
    configured_key = get_settings().api_key
    if not configured_key:
        return  # auth disabled when key not set
    provided = header_key or query_key
    if not provided or not hmac.compare_digest(provided, configured_key):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
