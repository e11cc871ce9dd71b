"""Inventory rules — amount validation and the non-negativity predicate."""

import pytest

from bookshop.core.errors import InsufficientStockError, InvalidArgumentError
from bookshop.core.inventory import check_decrease, validate_amount


@pytest.mark.parametrize("amount", [0, -1, True, 1.5])
def test_non_positive_or_non_int_amount_rejected(amount):
    with pytest.raises(InvalidArgumentError):
        validate_amount(amount)


def test_decrease_to_exactly_zero():
    assert check_decrease(7, 5, 5) == 0


def test_decrease_beyond_level_raises_with_details():
    with pytest.raises(InsufficientStockError) as exc:
        check_decrease(7, 5, 6)
    assert exc.value.available == 5
    assert exc.value.requested == 6
    assert exc.value.item_id == 7
    assert exc.value.http_status == 409
