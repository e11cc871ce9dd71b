"""Inventory Ledger rules — stock arithmetic with a non-negativity invariant.

Invariants:
    - amount is a positive int (bool rejected)
    - a decrease never produces a negative level

Design Decisions:
    - Only the predicate lives here; the atomic read-modify-write is the
      store's conditional UPDATE (services/inventory_ledger.py)
"""

from bookshop.core.errors import InsufficientStockError, InvalidArgumentError


def validate_amount(amount: int, field: str = "amount") -> int:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidArgumentError(f"{field} must be a positive integer", field)
    return amount


def check_decrease(item_id: int, level: int, amount: int) -> int:
    """Return the level after decreasing, or raise InsufficientStockError."""
    validate_amount(amount)
    if amount > level:
        raise InsufficientStockError(item_id, level, amount)
    return level - amount
