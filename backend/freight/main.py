"""Worldwide Freight API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FreightError → {success, message} envelopes
    - Settings (including JWT_SECRET) validated at import/startup: a missing secret
      stops the process before it serves a request
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Token issuer built during startup so an unusable secret fails fast
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freight.api.deps import get_token_issuer
from freight.api.error_handlers import register_error_handlers
from freight.api.routes import carriers, commodities, health, users
from freight.config import get_settings
from freight.infrastructure import database
from freight.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    get_token_issuer()
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Worldwide Freight API started")
    yield
    await manager.dispose()
    logger.info("Worldwide Freight API shutting down")


app = FastAPI(
    title="Worldwide Freight API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(commodities.router)
app.include_router(carriers.router)

register_error_handlers(app)
