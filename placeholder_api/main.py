"""Placeholder API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PlaceholderError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized, schema created and seeded on startup via lifespan
    - Every request produces one access log line (RequestLoggingMiddleware)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation is a setting: in-memory databases need it on every start,
      server databases are migrated with alembic instead
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placeholder_api.api.error_handlers import register_error_handlers
from placeholder_api.api.routes import albums, comments, health, photos, posts, todos, users
from placeholder_api.config import get_settings
from placeholder_api.infrastructure.database import init_db
from placeholder_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)
from placeholder_api.infrastructure.seed import seed_database

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
    if settings.create_schema:
        await manager.create_schema()
    if settings.seed_data:
        async with manager.session() as db:
            await seed_database(db)
    logger.info("Placeholder API started")
    yield
    await manager.close()
    logger.info("Placeholder API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.api_title, version=settings.api_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(posts.router)
app.include_router(comments.router)
app.include_router(albums.router)
app.include_router(photos.router)
app.include_router(todos.router)

register_error_handlers(app)
