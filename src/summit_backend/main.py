"""FastAPI application entry point."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import __version__
from .api.routes import backend, health, poi
from .config import settings
from .data.poi_repository import PoiNotFoundError, PoiStore, build_poi_store
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


async def _poi_not_found_handler(request: Request, exc: PoiNotFoundError) -> PlainTextResponse:
    logger.info("POI lookup miss on %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


def create_app(store: PoiStore | None = None) -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.app_name, version=__version__)
    # The store must exist before the app is handed to the server.
    app.state.poi_store = store if store is not None else build_poi_store()

    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(PoiNotFoundError, _poi_not_found_handler)

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(backend.router, prefix=settings.api_prefix)
    app.include_router(poi.router, prefix=settings.api_prefix)
    logger.info("%s ready, serving under %s", settings.app_name, settings.api_prefix)
    return app


app = create_app()


def resolve_port(raw: str | None) -> int:
    """Parse a PORT override, falling back to the configured port when missing or invalid."""
    if raw is None or not raw.strip():
        return settings.port
    try:
        port = int(raw)
    except ValueError:
        logger.warning("Invalid PORT value %r, using configured port %d", raw, settings.port)
        return settings.port
    if not 1 <= port <= 65535:
        logger.warning("PORT %d out of range, using configured port %d", port, settings.port)
        return settings.port
    return port


def run(port: int | None = None) -> None:
    """Console-script entry point."""
    uvicorn.run(
        "summit_backend.main:app",
        host=settings.host,
        port=port if port is not None else settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
