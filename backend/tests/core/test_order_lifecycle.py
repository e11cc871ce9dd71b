"""Order Lifecycle Engine — state machine, timestamps and derived totals.

Tests:
    - Every (current, requested) pair is accepted iff it is in the transition table
    - A rejected transition leaves status and every timestamp untouched
    - Stamps never go backwards even when the clock does
    - last_updated_at precedence and created_at fallback
    - total_price follows the CURRENT item price
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from itertools import product

import pytest

from bookshop.core.domain_types import OrderStatus
from bookshop.core.errors import InvalidTransitionError
from bookshop.core.order_lifecycle import (
    ALLOWED_TRANSITIONS, TERMINAL_STATUSES, apply_transition, can_transition,
    is_terminal, last_updated_at, total_price, transition_changes,
)

T0 = datetime(2026, 1, 10, 12, 0, 0)

_TIMESTAMPS = (
    "confirmed_at", "preparation_started_at", "shipped_at",
    "delivered_at", "cancelled_at",
)


@dataclass
class _Item:
    price: Decimal


@dataclass
class _Line:
    item: _Item
    quantity: int


@dataclass
class _Order:
    status: OrderStatus = OrderStatus.CART
    created_at: datetime = T0
    confirmed_at: datetime | None = None
    preparation_started_at: datetime | None = None
    shipped_at: datetime | None = None
    delivered_at: datetime | None = None
    cancelled_at: datetime | None = None
    lines: list = field(default_factory=list)


def _snapshot(order: _Order) -> tuple:
    return (order.status,) + tuple(getattr(order, a) for a in _TIMESTAMPS)


# ─── transition table ────────────────────────────────────────────

EXPECTED_EDGES = {
    (OrderStatus.CART, OrderStatus.PENDING),
    (OrderStatus.PENDING, OrderStatus.CONFIRMED),
    (OrderStatus.PENDING, OrderStatus.CANCELLED),
    (OrderStatus.CONFIRMED, OrderStatus.PREPARATION),
    (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    (OrderStatus.PREPARATION, OrderStatus.SHIPPED),
    (OrderStatus.PREPARATION, OrderStatus.CANCELLED),
    (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
    (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
}


@pytest.mark.parametrize("current,requested", list(product(OrderStatus, OrderStatus)))
def test_every_pair_accepted_only_if_in_table(current, requested):
    order = _Order(status=current)
    if (current, requested) in EXPECTED_EDGES:
        apply_transition(order, requested, T0 + timedelta(hours=1))
        assert order.status == requested
    else:
        before = _snapshot(order)
        with pytest.raises(InvalidTransitionError):
            apply_transition(order, requested, T0 + timedelta(hours=1))
        assert _snapshot(order) == before


def test_table_matches_expected_edges():
    edges = {(c, r) for c, targets in ALLOWED_TRANSITIONS.items() for r in targets}
    assert edges == EXPECTED_EDGES


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {OrderStatus.DELIVERED, OrderStatus.CANCELLED}
    assert is_terminal(OrderStatus.DELIVERED)
    assert not is_terminal(OrderStatus.SHIPPED)


def test_cart_cannot_be_cancelled():
    assert not can_transition(OrderStatus.CART, OrderStatus.CANCELLED)


def test_rejection_is_idempotent_on_terminal_order():
    order = _Order(status=OrderStatus.CONFIRMED, confirmed_at=T0)
    apply_transition(order, OrderStatus.CANCELLED, T0 + timedelta(minutes=5))
    before = _snapshot(order)
    for _ in range(3):
        with pytest.raises(InvalidTransitionError):
            apply_transition(order, OrderStatus.SHIPPED, T0 + timedelta(hours=2))
        assert _snapshot(order) == before


def test_error_message_names_both_states():
    with pytest.raises(InvalidTransitionError) as exc:
        apply_transition(_Order(status=OrderStatus.DELIVERED), OrderStatus.PENDING, T0)
    assert exc.value.current == "Delivered"
    assert exc.value.requested == "Pending"
    assert exc.value.http_status == 409


# ─── timestamps ──────────────────────────────────────────────────

def test_pending_stamps_nothing():
    changes = transition_changes(_Order(), OrderStatus.PENDING, T0)
    assert changes == {"status": OrderStatus.PENDING}


def test_each_status_stamps_its_field():
    order = _Order(status=OrderStatus.PENDING)
    steps = [
        (OrderStatus.CONFIRMED, "confirmed_at"),
        (OrderStatus.PREPARATION, "preparation_started_at"),
        (OrderStatus.SHIPPED, "shipped_at"),
        (OrderStatus.DELIVERED, "delivered_at"),
    ]
    for hours, (status, attr) in enumerate(steps, start=1):
        now = T0 + timedelta(hours=hours)
        apply_transition(order, status, now)
        assert getattr(order, attr) == now


def test_stamp_never_precedes_previous_stamp():
    order = _Order(status=OrderStatus.CONFIRMED, confirmed_at=T0 + timedelta(days=1))
    apply_transition(order, OrderStatus.PREPARATION, T0)
    assert order.preparation_started_at == T0 + timedelta(days=1)


def test_transition_changes_does_not_mutate():
    order = _Order(status=OrderStatus.PENDING)
    transition_changes(order, OrderStatus.CONFIRMED, T0)
    assert order.status == OrderStatus.PENDING
    assert order.confirmed_at is None


# ─── last_updated_at ─────────────────────────────────────────────

def test_last_updated_falls_back_to_created_at():
    assert last_updated_at(_Order()) == T0


def test_last_updated_prefers_confirmed_over_created():
    order = _Order(created_at=T0, confirmed_at=T0 + timedelta(hours=1))
    assert last_updated_at(order) == T0 + timedelta(hours=1)


def test_last_updated_cancelled_wins_over_everything():
    order = _Order(
        confirmed_at=T0 + timedelta(hours=1),
        preparation_started_at=T0 + timedelta(hours=2),
        cancelled_at=T0 + timedelta(hours=3),
    )
    assert last_updated_at(order) == T0 + timedelta(hours=3)


def test_last_updated_is_at_least_created_at():
    order = _Order(status=OrderStatus.PENDING)
    apply_transition(order, OrderStatus.CONFIRMED, T0 - timedelta(days=3))
    assert last_updated_at(order) >= order.created_at


# ─── totals ──────────────────────────────────────────────────────

def test_total_price_sums_lines():
    order = _Order(lines=[
        _Line(_Item(Decimal("10.00")), 2),
        _Line(_Item(Decimal("5.50")), 1),
    ])
    assert total_price(order) == Decimal("25.50")


def test_total_price_follows_current_item_price():
    book = _Item(Decimal("10.00"))
    order = _Order(lines=[_Line(book, 2), _Line(_Item(Decimal("5.50")), 1)])
    assert total_price(order) == Decimal("25.50")
    book.price = Decimal("12.00")
    assert total_price(order) == Decimal("29.50")


def test_total_price_of_empty_order_is_zero():
    assert total_price(_Order()) == Decimal("0")
