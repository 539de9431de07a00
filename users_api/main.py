"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Health router registered before users: /health/* must not fall into /{id}
    - Database manager created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.database import close_db, init_db
from users_api.infrastructure.observability import setup_logging

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
    logger.info(f"Users API started on :{settings.port}")
    yield
    await close_db()
    logger.info("Users API shut down")


app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
