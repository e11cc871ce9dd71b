"""Domain Types — enum values are the strings clients already receive."""

from bookshop.core.domain_types import (
    ConditionKind, CoverType, ItemId, OrderStatus, PaymentType, UsedGrade,
)


def test_identity_types_wrap_int():
    assert ItemId(5) == 5


def test_order_status_values():
    assert [s.value for s in OrderStatus] == [
        "Cart", "Pending", "Confirmed", "Preparation",
        "Shipped", "Delivered", "Cancelled",
    ]


def test_multi_word_values_are_camel_case():
    assert CoverType.SPIRAL_BOUND.value == "SpiralBound"
    assert PaymentType.APPLE_PAY.value == "ApplePay"
    assert PaymentType.GOOGLE_PAY.value == "GooglePay"


def test_condition_and_grade_members():
    assert set(ConditionKind) == {ConditionKind.NEW, ConditionKind.USED}
    assert len(UsedGrade) == 4
