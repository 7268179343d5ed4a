"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map errors to {"error"} JSON or plain-text responses
    - CORS configured from settings (not hardcoded)
    - One database pool per process, opened and closed by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Landing page and /public mounted alongside the API; API prefixes never collide
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker import __version__
from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercise, health, landing
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import close_db, init_db
from exercise_tracker.infrastructure.observability import setup_logging

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
    )
    if settings.database_create_tables:
        await manager.create_tables()
        logger.info("Database tables ensured")
    logger.info("Exercise Tracker API started")
    yield
    await close_db()
    logger.info("Exercise Tracker API shut down")


app = FastAPI(
    title="Exercise Tracker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(landing.router)
app.include_router(health.router)
app.include_router(exercise.router)

app.mount("/public", StaticFiles(directory=landing.STATIC_DIR), name="public")

register_error_handlers(app)
