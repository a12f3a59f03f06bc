"""Marketplace API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MarketplaceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage and the Marketplace stores built once on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Marketplace kept on app.state and injected with Depends(get_marketplace)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.api.error_handlers import register_error_handlers
from marketplace.api.routes import (
    admin_auth, admin_listings, admin_stats, auth, health, listings,
)
from marketplace.config import get_settings
from marketplace.infrastructure.observability import setup_logging
from marketplace.infrastructure.storage import create_storage
from marketplace.services.marketplace import build_marketplace

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    storage = create_storage(settings.database_url)
    app.state.marketplace = build_marketplace(settings, storage)
    logger.info("Marketplace API started")
    yield
    storage.dispose()
    logger.info("Marketplace API shutting down")


app = FastAPI(
    title="Marketplace API", version="1.0.0", lifespan=lifespan,
)

# CORS origins come from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(listings.router)
app.include_router(auth.router)
app.include_router(admin_auth.router)
app.include_router(admin_listings.router)
app.include_router(admin_stats.router)

register_error_handlers(app)
