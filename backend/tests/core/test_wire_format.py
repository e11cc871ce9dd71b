"""Wire Format — timestamp and price text clients parse."""

from datetime import datetime
from decimal import Decimal

from bookshop.core.wire_format import format_price, format_timestamp, parse_timestamp


def test_timestamp_has_no_fraction_or_zone():
    assert format_timestamp(datetime(2026, 2, 3, 4, 5, 6, 789)) == "2026-02-03T04:05:06"


def test_none_timestamp_passes_through():
    assert format_timestamp(None) is None


def test_parse_timestamp():
    assert parse_timestamp("2026-02-03T04:05:06") == datetime(2026, 2, 3, 4, 5, 6)


def test_price_has_two_decimals_half_up():
    assert format_price(Decimal("25.5")) == "25.50"
    assert format_price(Decimal("0.125")) == "0.13"
    assert format_price(3) == "3.00"
