import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from duckdps.api.deps import set_fatduck_factory, verify_api_key
from duckdps.config import APP_VERSION, get_settings
from duckdps.errors import DuckDPSError
from duckdps.fatduck.factory import FatDuckFactory

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings = get_settings()
    logging.getLogger("duckdps").setLevel(settings.log_level.upper())

    # Shared FatDuck client factory (one HTTP pool for all requests)
    factory = FatDuckFactory(settings)
    await factory.start()
    set_fatduck_factory(factory)
    logger.info(
        "FatDuck factory started (telemetry=%s, lookup=%s)",
        settings.telemetry.base_url, settings.lookup.base_url,
    )

    yield

    await factory.stop()
    set_fatduck_factory(None)
    logger.info("FatDuck factory stopped")


async def _duckdps_error_handler(request: Request, exc: DuckDPSError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500, content={"error": str(exc) or "Internal server error"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="DuckDPS Run Analyzer",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["X-API-Key"],
    )

    app.add_exception_handler(DuckDPSError, _duckdps_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    from duckdps.api.routes.health import router as health_router
    from duckdps.api.routes.runs import router as runs_router

    # Health router has no auth
    app.include_router(health_router)
    app.include_router(runs_router, dependencies=[Depends(verify_api_key)])

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the bundled run viewer page."""
        return FileResponse(STATIC_DIR / "index.html")

    return app
