"""Cart Expiration Sweeper — periodic purge of abandoned carts.

Invariants:
    - Each sweep runs in its own session and unit of work
    - A failed sweep is logged and retried on the next tick; the loop only
      stops when its task is cancelled
"""

import asyncio
import logging

from bookshop.config import Settings
from bookshop.infrastructure import database as db_module
from bookshop.services.cart import CartService

logger = logging.getLogger(__name__)


async def sweep_expired_carts(settings: Settings) -> int:
    if not db_module.db_manager:
        raise RuntimeError("Database not initialized")
    async with db_module.db_manager.session() as db:
        service = CartService(
            db, settings.cart_expiration_days, settings.deleted_customer_username,
        )
        return await service.purge_expired()


async def run_cart_sweeper(settings: Settings) -> None:
    """Sweep forever at the configured interval."""
    while True:
        try:
            await sweep_expired_carts(settings)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Cart sweep failed: {e}", exc_info=True)
        await asyncio.sleep(settings.cart_sweep_interval_seconds)
