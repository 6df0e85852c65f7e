from urllib.parse import urlparse

from fastapi import APIRouter

from duckdps.config import APP_VERSION, get_settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health():
    settings = get_settings()
    return {
        "status": "ok",
        "version": APP_VERSION,
        "telemetry": urlparse(settings.telemetry.base_url).netloc,
        "lookup": urlparse(settings.lookup.base_url).netloc,
    }
