"""Cart Rules — age gate, cart merging and expiry cutoff.

Invariants:
    - An item is appropriate for age A iff minimum_age <= A
    - Cart lines merge: adding an item already in the cart sums quantities
    - A cart expires once created_at is strictly older than now - expiration_days
"""

from datetime import date, datetime, timedelta

from bookshop.core.errors import InvalidArgumentError
from bookshop.core.inventory import validate_amount


def age_on(date_of_birth: date, today: date) -> int:
    """Completed years between date_of_birth and today."""
    before_birthday = (today.month, today.day) < (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (1 if before_birthday else 0)


def is_appropriate_for_age(minimum_age: int, age: int) -> bool:
    return minimum_age <= age


def validate_age(age: int) -> int:
    if isinstance(age, bool) or not isinstance(age, int) or age < 0:
        raise InvalidArgumentError("Age cannot be negative", "age")
    return age


def merged_quantity(current: int | None, added: int) -> int:
    validate_amount(added, "quantity")
    return (current or 0) + added


def expiry_cutoff(now: datetime, expiration_days: int) -> datetime:
    """Carts created before this instant are expired."""
    return now - timedelta(days=expiration_days)
