"""Music Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {success: false, message} envelopes
    - OPTIONS preflight answered by middleware before routing
    - Database initialized on startup via lifespan context manager

Run with:
    uvicorn catalog_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.api.cors import cors_middleware
from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.routes import admin, health, releases, tracks
from catalog_api.config import get_settings
from catalog_api.infrastructure.database import init_db
from catalog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if settings.create_schema:
        await manager.create_schema()
    logger.info("Music Catalog API started")
    yield
    await manager.dispose()
    logger.info("Music Catalog API shutting down")


app = FastAPI(
    title="Music Catalog API",
    version=get_settings().api_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_middleware(BaseHTTPMiddleware, dispatch=cors_middleware)

app.include_router(health.router)
app.include_router(tracks.router)
app.include_router(releases.router)
app.include_router(admin.router)

register_error_handlers(app)
