"""FastAPI application factory for JSON Healer."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from jsonhealer import __version__
from jsonhealer.api.middleware import (
    RequestBodyLimitMiddleware,
    RequestTimingMiddleware,
    SecurityHeadersMiddleware,
)
from jsonhealer.api.routers import healing, presets
from jsonhealer.api.schemas import HealthResponse
from jsonhealer.models.options import HealerOptions
from jsonhealer.settings import Settings

logger = logging.getLogger("jsonhealer.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Fail at startup, not per request, when the default preset is unknown."""
    settings: Settings = app.state.settings
    HealerOptions.preset(settings.default_preset)
    logger.info(
        "healing with preset=%s, max_document_size=%d, max_nesting_depth=%d",
        settings.default_preset, settings.max_document_size, settings.max_nesting_depth,
    )
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; *settings* defaults to environment / .env values."""
    settings = settings or Settings()

    app = FastAPI(
        title="JSON Healer",
        description="Diagnoses malformed JSON and suggests or applies repairs.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Outermost last: timing wraps the header and body-limit layers.
    app.add_middleware(
        RequestBodyLimitMiddleware,
        document_limit_mb=settings.document_body_limit_mb,
        default_limit_mb=settings.default_body_limit_mb,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(healing.router, tags=["healing"])
    app.include_router(presets.router, prefix="/presets", tags=["presets"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Entry point for ``jsonhealer-api``."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "JSON Healer API v%s listening on %s:%d",
        __version__, settings.api_server_host, settings.effective_port,
    )
    uvicorn.run(
        "jsonhealer.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
