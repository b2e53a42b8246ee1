"""Forum API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ForumError → {"message": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Store handle created on startup, kept on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static files mounted AFTER API and page routes so those take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from forum.api.error_handlers import register_error_handlers
from forum.infrastructure.database import DatabaseSessionManager
from forum.infrastructure.observability import setup_logging
from forum.config import get_settings
from forum.api.routes import health, pages, questions, replies, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    app.state.db_manager = manager
    logger.info(f"Forum API started on port {settings.port}")
    yield
    logger.info("Forum API shutting down")
    await manager.dispose()
    app.state.db_manager = None


app = FastAPI(
    title="Discussion Forum API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(questions.router)
app.include_router(replies.router)
app.include_router(pages.router)

# Static assets (stylesheets, client scripts) served from the public directory
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
