"""Inventory Ledger — stock increase/decrease with a non-negativity invariant.

Invariants:
    - decrease_stock is one conditional UPDATE guarded by stock_quantity >= amount:
      it never observes a transient negative value and never succeeds when it
      would produce one, whatever the concurrency
    - No reservation concept: a decrease is committed stock, the sole oversell gate
    - Runs inside the caller's unit of work (no commit here)
"""

import logging

from sqlalchemy import select, true

from bookshop.core.errors import InsufficientStockError, NotFoundError
from bookshop.core.inventory import validate_amount
from bookshop.core.repository_protocols import EntityStore
from bookshop.models.item import Item

logger = logging.getLogger(__name__)


class InventoryLedger:
    """Stock operations for catalog items."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def stock_level(self, item_id: int) -> int:
        level = await self.store.scalar(
            select(Item.stock_quantity).where(Item.id == item_id),
        )
        if level is None:
            raise NotFoundError("Item", item_id)
        return level

    async def increase_stock(self, item_id: int, amount: int) -> int:
        validate_amount(amount)
        matched = await self.store.conditional_update(
            Item, item_id, true(),
            {"stock_quantity": Item.stock_quantity + amount},
        )
        if not matched:
            raise NotFoundError("Item", item_id)
        logger.info(
            f"Stock increased for item {item_id}",
            extra={"item_id": item_id, "amount": amount},
        )
        return await self.stock_level(item_id)

    async def decrease_stock(self, item_id: int, amount: int) -> int:
        validate_amount(amount)
        matched = await self.store.conditional_update(
            Item, item_id, Item.stock_quantity >= amount,
            {"stock_quantity": Item.stock_quantity - amount},
        )
        if not matched:
            level = await self.stock_level(item_id)
            logger.warning(
                f"Stock decrease rejected for item {item_id}",
                extra={"item_id": item_id, "amount": amount},
            )
            raise InsufficientStockError(item_id, level, amount)
        logger.info(
            f"Stock decreased for item {item_id}",
            extra={"item_id": item_id, "amount": amount},
        )
        return await self.stock_level(item_id)
