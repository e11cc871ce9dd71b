"""Bookshop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookshopError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - The cart expiration sweeper runs only while the app is up and is
      cancelled on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshop.api.error_handlers import register_error_handlers
from bookshop.api.routes import carts, catalog, health, items, orders, reviews
from bookshop.config import get_settings
from bookshop.infrastructure import database as db_module
from bookshop.infrastructure.observability import setup_logging
from bookshop.services.cart_expiration import run_cart_sweeper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_module.init_db(settings)
    sweeper = None
    if settings.cart_sweep_enabled:
        sweeper = asyncio.create_task(run_cart_sweeper(settings))
    logger.info("Bookshop API started")
    yield
    logger.info("Bookshop API shutting down")
    if sweeper is not None:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
    if db_module.db_manager:
        await db_module.db_manager.dispose()


app = FastAPI(title="Bookshop API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(items.router)
app.include_router(reviews.router)
app.include_router(carts.router)
app.include_router(orders.router)

register_error_handlers(app)
