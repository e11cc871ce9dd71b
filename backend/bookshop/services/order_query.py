"""Order Query — order listings and detail, ordered by last update.

Invariants:
    - Listings are sorted by core.order_lifecycle.last_updated_at, newest first
      (ties broken by descending id)
    - orders_for_customer hides Cart and Pending orders (not yet placed)
    - Unknown item/customer/order ids raise NotFoundError
    - Read-only: nothing here writes
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.domain_types import OrderStatus
from bookshop.core.errors import NotFoundError
from bookshop.core.order_lifecycle import last_updated_at
from bookshop.infrastructure.store import SqlAlchemyStore
from bookshop.models import Customer, Item, Order, OrderItem
from bookshop.schemas.item import ItemSummary
from bookshop.schemas.order import OrderSummary, OrderView
from bookshop.services.views import item_summary, order_summary, order_view

_UNPLACED = (OrderStatus.CART, OrderStatus.PENDING)


def _newest_first(orders: list[Order]) -> list[OrderSummary]:
    ordered = sorted(orders, key=lambda o: (last_updated_at(o), o.id), reverse=True)
    return [order_summary(o) for o in ordered]


class OrderQueryService:
    def __init__(self, db: AsyncSession):
        self.store = SqlAlchemyStore(db)

    async def orders_for_item(self, item_id: int) -> list[OrderSummary]:
        if not await self.store.exists(Item, item_id):
            raise NotFoundError("Item", item_id)
        orders = await self.store.filtered_scan(
            Order, Order.lines.any(OrderItem.item_id == item_id),
        )
        return _newest_first(orders)

    async def orders_for_customer(self, customer_id: int) -> list[OrderSummary]:
        if not await self.store.exists(Customer, customer_id):
            raise NotFoundError("Customer", customer_id)
        orders = await self.store.filtered_scan(
            Order,
            Order.customer_id == customer_id,
            Order.status.not_in(_UNPLACED),
        )
        return _newest_first(orders)

    async def list_orders(self, status: OrderStatus | None = None) -> list[OrderSummary]:
        criteria = [] if status is None else [Order.status == OrderStatus(status)]
        orders = await self.store.filtered_scan(Order, *criteria)
        return _newest_first(orders)

    async def order_detail(self, order_id: int) -> OrderView:
        return order_view(await self.store.load(Order, order_id))

    async def items_in_order(self, order_id: int) -> list[ItemSummary]:
        order = await self.store.load(Order, order_id)
        return [item_summary(line.item) for line in order.lines]
