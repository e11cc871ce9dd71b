"""Order Schemas — cart commands, status commands and order views.

Invariants:
    - Quantities are positive ints; statuses and payment types are closed enums
    - totals and last_updated_at are derived by core.order_lifecycle, never sent in
"""

from pydantic import BaseModel, Field

from bookshop.core.domain_types import OrderStatus, PaymentType
from bookshop.schemas.item import ItemSummary
from bookshop.schemas.wire import Price, Timestamp


# --- Commands -----------------------------------------------------------------

class CartItemAdd(BaseModel):
    item_id: int
    quantity: int = Field(1, gt=0)


class CartQuantityUpdate(BaseModel):
    quantity: int = Field(gt=0)


class StatusChange(BaseModel):
    status: OrderStatus


class ConfirmOrder(BaseModel):
    payment_type: PaymentType


# --- Views --------------------------------------------------------------------

class OrderSummary(BaseModel):
    id: int
    status: OrderStatus
    total_price: Price
    last_updated_at: Timestamp
    customer_id: int


class OrderLineView(BaseModel):
    item: ItemSummary
    quantity: int


class PaymentView(BaseModel):
    payment_type: PaymentType
    amount: Price
    paid_at: Timestamp


class OrderView(BaseModel):
    id: int
    status: OrderStatus
    customer_id: int
    total_price: Price
    created_at: Timestamp
    confirmed_at: Timestamp | None = None
    preparation_started_at: Timestamp | None = None
    shipped_at: Timestamp | None = None
    delivered_at: Timestamp | None = None
    cancelled_at: Timestamp | None = None
    last_updated_at: Timestamp
    payment: PaymentView | None = None
    lines: list[OrderLineView]


class CartView(BaseModel):
    id: int
    customer_id: int
    created_at: Timestamp
    total_price: Price
    lines: list[OrderLineView]
