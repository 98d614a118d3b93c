"""Floor Map API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FloorMapError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan context manager, not @app.on_event
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floormap.api.error_handlers import register_error_handlers
from floormap.api.routes import (
    account, admin, auth, floors, health, maps, pins, public_edit, viewer,
)
from floormap.config import get_settings
from floormap.infrastructure import database
from floormap.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Floor Map API started")
    yield
    logger.info("Floor Map API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(title="Floor Map API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=settings.cors_max_age,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(account.router)
app.include_router(admin.router)
app.include_router(maps.router)
app.include_router(floors.router)
app.include_router(pins.router)
app.include_router(public_edit.router)
app.include_router(viewer.router)

register_error_handlers(app)
