"""Cart Service — a customer's single open cart and its lines.

Invariants:
    - At most one Cart-status order per customer; add_item creates it on demand
    - Adding an item already in the cart merges quantities into one line
    - A line's quantity never exceeds the item's current stock (checked, not reserved)
    - The deleted-customer placeholder cannot shop
    - Age-restricted items need customer age >= minimum_age of the item's category
    - purge_expired deletes carts older than the configured expiration window
    - Losing the race to open a cart (unique index on open carts) retries the
      add once against the cart that won

Design Decisions:
    - Stock is only checked here; it is decreased at confirmation by the ledger
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.cart_rules import (
    age_on, expiry_cutoff, is_appropriate_for_age, merged_quantity,
)
from bookshop.core.domain_types import OrderStatus
from bookshop.core.errors import InvalidArgumentError, NotFoundError
from bookshop.core.inventory import check_decrease, validate_amount
from bookshop.infrastructure.clock import utc_now
from bookshop.infrastructure.store import SqlAlchemyStore, unit_of_work
from bookshop.models import Customer, Item, Order, OrderItem
from bookshop.schemas.order import CartView
from bookshop.services.views import cart_view

logger = logging.getLogger(__name__)


class CartService:
    """Cart mutations and expiry sweeping."""

    def __init__(
        self,
        db: AsyncSession,
        expiration_days: int,
        deleted_customer_username: str,
        now: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        self.expiration_days = expiration_days
        self.deleted_customer_username = deleted_customer_username
        self.now = now

    async def get_cart(self, customer_id: int) -> CartView:
        store = SqlAlchemyStore(self.db)
        await store.load(Customer, customer_id)
        return cart_view(await self._require_cart(store, customer_id))

    async def add_item(self, customer_id: int, item_id: int, quantity: int = 1) -> CartView:
        validate_amount(quantity, "quantity")
        try:
            return await self._add_item(customer_id, item_id, quantity)
        except IntegrityError:
            # lost the race to open the cart
            logger.info(
                f"Cart for customer {customer_id} opened concurrently, retrying",
                extra={"customer_id": customer_id},
            )
            return await self._add_item(customer_id, item_id, quantity)

    async def _add_item(self, customer_id: int, item_id: int, quantity: int) -> CartView:
        async with unit_of_work(self.db) as store:
            customer = await store.load(Customer, customer_id)
            if customer.username == self.deleted_customer_username:
                raise InvalidArgumentError(
                    "Deleted customer cannot add items to a cart", "customer_id",
                )
            item = await store.load(Item, item_id)
            age = age_on(customer.date_of_birth, self.now().date())
            if not is_appropriate_for_age(item.age_category.minimum_age, age):
                raise InvalidArgumentError(
                    f"Customer is too young for item {item_id}", "customer_id",
                )

            cart = await self._find_cart(store, customer_id)
            if cart is None:
                cart = Order(
                    customer_id=customer_id,
                    status=OrderStatus.CART,
                    created_at=self.now(),
                )
                await store.save(cart)
                cart = await store.load(Order, cart.id)
                logger.info(
                    f"Cart {cart.id} opened",
                    extra={"order_id": cart.id, "customer_id": customer_id},
                )

            line = self._line(cart, item_id)
            new_quantity = merged_quantity(line.quantity if line else None, quantity)
            check_decrease(item.id, item.stock_quantity, new_quantity)
            if line is None:
                OrderItem(order=cart, item=item, quantity=new_quantity)
            else:
                line.quantity = new_quantity
            await store.save(cart)
            view = cart_view(cart)
        return view

    async def update_quantity(self, customer_id: int, item_id: int, quantity: int) -> CartView:
        validate_amount(quantity, "quantity")
        async with unit_of_work(self.db) as store:
            cart = await self._require_cart(store, customer_id)
            line = self._require_line(cart, item_id)
            check_decrease(item_id, line.item.stock_quantity, quantity)
            line.quantity = quantity
            await store.save(cart)
            view = cart_view(cart)
        return view

    async def remove_item(self, customer_id: int, item_id: int) -> CartView:
        async with unit_of_work(self.db) as store:
            cart = await self._require_cart(store, customer_id)
            cart.lines.remove(self._require_line(cart, item_id))
            await store.save(cart)
            view = cart_view(cart)
        return view

    async def purge_expired(self) -> int:
        """Delete every cart created before the expiry cutoff. Returns the count."""
        cutoff = expiry_cutoff(self.now(), self.expiration_days)
        async with unit_of_work(self.db) as store:
            expired = await store.filtered_scan(
                Order, Order.status == OrderStatus.CART, Order.created_at < cutoff,
            )
            for cart in expired:
                await store.delete(cart)
        if expired:
            logger.info(f"Purged {len(expired)} expired carts")
        return len(expired)

    # ─── helpers ─────────────────────────────────────────────────

    @staticmethod
    async def _find_cart(store: SqlAlchemyStore, customer_id: int) -> Order | None:
        carts = await store.filtered_scan(
            Order, Order.customer_id == customer_id, Order.status == OrderStatus.CART,
        )
        return carts[0] if carts else None

    async def _require_cart(self, store: SqlAlchemyStore, customer_id: int) -> Order:
        cart = await self._find_cart(store, customer_id)
        if cart is None:
            raise NotFoundError("Cart", customer_id)
        return cart

    @staticmethod
    def _line(cart: Order, item_id: int) -> OrderItem | None:
        return next((line for line in cart.lines if line.item_id == item_id), None)

    def _require_line(self, cart: Order, item_id: int) -> OrderItem:
        line = self._line(cart, item_id)
        if line is None:
            raise NotFoundError("Cart item", item_id)
        return line
