"""Palette Picker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PalettePickerError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event
    - Static directory mounted AFTER API routes so /api/v1/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from palette_picker import __version__
from palette_picker.api.error_handlers import register_error_handlers
from palette_picker.api.routes import health, palettes, projects
from palette_picker.config import get_settings
from palette_picker.infrastructure.database import close_db, init_db
from palette_picker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.resolved_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Palette Picker API started ({settings.app_env})")
    yield
    await close_db()
    logger.info("Palette Picker API shutting down")


app = FastAPI(
    title="Palette Picker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(palettes.router)

register_error_handlers(app)

if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
