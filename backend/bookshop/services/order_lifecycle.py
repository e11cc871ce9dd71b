"""Order Lifecycle Service — persists status transitions computed by the core engine.

Invariants:
    - Every transition is validated by core.order_lifecycle BEFORE any write;
      a rejected request leaves status and timestamps untouched
    - An illegal target is always InvalidTransitionError, whatever the target
    - The status write is a conditional UPDATE guarded on the status that was
      read: of two concurrent transitions from the same state, one wins and
      the other gets InvalidTransitionError
    - checkout rejects an empty cart
    - confirm decreases stock for every line and records one Payment for the
      order total, all in one unit of work (any shortfall rolls everything back)
    - cancel never restores stock
    - After a status write the order is reloaded through the store, so lines
      and their items are loaded again before any view or total reads them

Design Decisions:
    - transition() routes Pending through checkout; a legal Pending -> Confirmed
      request is refused with InvalidArgumentError because it has no payment type
    - Orders of a removed account move to the placeholder customer; its open
      cart is deleted instead
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.domain_types import OrderStatus, PaymentType
from bookshop.core.errors import (
    InvalidArgumentError, InvalidTransitionError, NotFoundError,
)
from bookshop.core.order_lifecycle import (
    total_price, transition_changes, validate_transition,
)
from bookshop.core.repository_protocols import EntityStore
from bookshop.infrastructure.clock import utc_now
from bookshop.infrastructure.store import unit_of_work
from bookshop.models import Customer, Order, Payment
from bookshop.schemas.order import OrderView
from bookshop.services.inventory_ledger import InventoryLedger
from bookshop.services.views import order_view

logger = logging.getLogger(__name__)


class OrderLifecycleService:
    """Checkout, confirmation, cancellation and generic status changes."""

    def __init__(
        self,
        db: AsyncSession,
        now: Callable[[], datetime] = utc_now,
        deleted_customer_username: str = "DeletedUser",
    ):
        self.db = db
        self.now = now
        self.deleted_customer_username = deleted_customer_username

    async def transition(self, order_id: int, status: OrderStatus) -> OrderView:
        status = OrderStatus(status)
        if status == OrderStatus.PENDING:
            return await self.checkout(order_id)
        async with unit_of_work(self.db) as store:
            order = await store.load(Order, order_id)
            validate_transition(order.status, status)
            if status == OrderStatus.CONFIRMED:
                raise InvalidArgumentError(
                    "Confirming an order requires a payment type", "status",
                )
            order = await self._apply(store, order, status)
            view = order_view(order)
        return view

    async def checkout(self, order_id: int) -> OrderView:
        """Cart -> Pending."""
        async with unit_of_work(self.db) as store:
            order = await store.load(Order, order_id)
            validate_transition(order.status, OrderStatus.PENDING)
            if not order.lines:
                raise InvalidArgumentError("Cannot check out an empty cart", "lines")
            order = await self._apply(store, order, OrderStatus.PENDING)
            view = order_view(order)
        return view

    async def confirm(self, order_id: int, payment_type: PaymentType) -> OrderView:
        """Pending -> Confirmed: take stock for every line and record the payment."""
        payment_type = PaymentType(payment_type)
        async with unit_of_work(self.db) as store:
            order = await store.load(Order, order_id)
            validate_transition(order.status, OrderStatus.CONFIRMED)
            amount = total_price(order)

            ledger = InventoryLedger(store)
            for line in order.lines:
                await ledger.decrease_stock(line.item_id, line.quantity)

            order = await self._apply(store, order, OrderStatus.CONFIRMED)
            await store.save(Payment(
                order_id=order.id,
                payment_type=payment_type,
                paid_at=order.confirmed_at,
                amount=amount,
            ))
            order = await store.load(Order, order_id)
            view = order_view(order)

        logger.info(
            f"Order {order_id} paid",
            extra={"order_id": order_id, "amount": str(amount)},
        )
        return view

    async def cancel(self, order_id: int) -> OrderView:
        return await self.transition(order_id, OrderStatus.CANCELLED)

    async def assign_orders_to_deleted_customer(self, customer_id: int) -> int:
        """Delete the customer's cart and move every placed order to the placeholder.

        Returns the number of orders moved.
        """
        async with unit_of_work(self.db) as store:
            await store.load(Customer, customer_id)
            placeholder = await self._placeholder(store)
            if placeholder.id == customer_id:
                raise InvalidArgumentError(
                    "The deleted-customer placeholder cannot be removed", "customer_id",
                )
            orders = await store.filtered_scan(Order, Order.customer_id == customer_id)
            moved = 0
            for order in orders:
                if order.status == OrderStatus.CART:
                    await store.delete(order)
                else:
                    order.customer_id = placeholder.id
                    await store.save(order)
                    moved += 1

        logger.info(
            f"Moved {moved} orders of customer {customer_id} to the placeholder",
            extra={"customer_id": customer_id},
        )
        return moved

    # ─── helpers ─────────────────────────────────────────────────

    async def _apply(
        self, store: EntityStore, order: Order, status: OrderStatus,
    ) -> Order:
        current = order.status
        changes = transition_changes(order, status, self.now())
        won = await store.conditional_update(
            Order, order.id, Order.status == current, changes,
        )
        if not won:
            latest = await store.load(Order, order.id)
            raise InvalidTransitionError(latest.status.value, status.value)
        logger.info(
            f"Order {order.id} moved from {current.value} to {status.value}",
            extra={"order_id": order.id, "status": status.value},
        )
        return await store.load(Order, order.id)

    async def _placeholder(self, store: EntityStore) -> Customer:
        found = await store.filtered_scan(
            Customer, Customer.username == self.deleted_customer_username,
        )
        if not found:
            raise NotFoundError("Customer", self.deleted_customer_username)
        return found[0]
