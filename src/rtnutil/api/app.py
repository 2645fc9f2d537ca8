"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from rtnutil.api.routes import health, rtn
from rtnutil.core.config import AppSettings
from rtnutil.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings and configure logging for the app's lifetime."""
    settings = app.state.settings
    configure_logging(settings)
    logger.info("RTN service starting (environment=%s)", settings.environment)
    yield


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = AppSettings()

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        root_path=settings.api.root_path,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.include_router(health.router)
    app.include_router(rtn.router, prefix="/rtn")
    return app
