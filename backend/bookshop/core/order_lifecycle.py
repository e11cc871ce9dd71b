"""Order Lifecycle Engine — status state machine and order-derived fields.

Invariants:
    - Primary sequence: Cart -> Pending -> Confirmed -> Preparation -> Shipped -> Delivered
    - Cancelled reachable from Pending, Confirmed, Preparation, Shipped (not Cart)
    - Delivered and Cancelled are terminal; at most one of delivered_at/cancelled_at is set
    - No transition moves backwards in the primary sequence
    - apply_transition validates BEFORE mutating: a rejected call leaves the order untouched
    - Status timestamps are non-decreasing (stamp = max(now, last_updated_at))
    - total_price uses each item's CURRENT price (never a snapshot)

Design Decisions:
    - ALLOWED_TRANSITIONS is the single source of truth; shell code never
      compares statuses by hand
    - Pure functions over OrderLike: the shell loads, calls, then persists
    - total_price recomputed on read is the existing behaviour; past order
      totals follow later price changes (kept as-is, see DESIGN.md)
"""

from datetime import datetime
from decimal import Decimal

from bookshop.core.domain_types import OrderStatus
from bookshop.core.errors import InvalidTransitionError
from bookshop.core.repository_protocols import OrderLike, OrderLineLike


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.CART: frozenset({OrderStatus.PENDING}),
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PREPARATION, OrderStatus.CANCELLED}),
    OrderStatus.PREPARATION: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)

# Target status -> timestamp attribute it stamps. Pending stamps nothing.
STATUS_TIMESTAMP_FIELDS: dict[OrderStatus, str] = {
    OrderStatus.CONFIRMED: "confirmed_at",
    OrderStatus.PREPARATION: "preparation_started_at",
    OrderStatus.SHIPPED: "shipped_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}

# lastUpdatedAt precedence, highest first.
_LAST_UPDATED_PRECEDENCE: tuple[str, ...] = (
    "cancelled_at",
    "delivered_at",
    "shipped_at",
    "preparation_started_at",
    "confirmed_at",
)


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    return OrderStatus(requested) in ALLOWED_TRANSITIONS[OrderStatus(current)]


def is_terminal(status: OrderStatus) -> bool:
    return OrderStatus(status) in TERMINAL_STATUSES


def validate_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Raise InvalidTransitionError unless current -> requested is in the table."""
    if not can_transition(current, requested):
        raise InvalidTransitionError(
            OrderStatus(current).value, OrderStatus(requested).value,
        )


def transition_changes(
    order: OrderLike, requested: OrderStatus, now: datetime,
) -> dict:
    """Column values a legal transition writes. Pure: the order is not touched."""
    requested = OrderStatus(requested)
    validate_transition(order.status, requested)
    changes: dict = {"status": requested}
    field_name = STATUS_TIMESTAMP_FIELDS.get(requested)
    if field_name:
        changes[field_name] = max(now, last_updated_at(order))
    return changes


def apply_transition(
    order: OrderLike, requested: OrderStatus, now: datetime,
) -> OrderLike:
    """Validate then mutate order in place. Returns the same order."""
    for attr, value in transition_changes(order, requested, now).items():
        setattr(order, attr, value)
    return order


def last_updated_at(order: OrderLike) -> datetime:
    """Latest status timestamp by precedence, falling back to created_at. Total."""
    for attr in _LAST_UPDATED_PRECEDENCE:
        value = getattr(order, attr)
        if value is not None:
            return value
    return order.created_at


def line_total(line: OrderLineLike) -> Decimal:
    return Decimal(line.item.price) * line.quantity


def total_price(order: OrderLike) -> Decimal:
    """Sum of current item price x quantity over all lines."""
    return sum((line_total(line) for line in order.lines), Decimal("0"))
