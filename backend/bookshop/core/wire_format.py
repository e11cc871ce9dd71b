"""Wire Format — textual contract existing clients parse.

Invariants:
    - Timestamps: yyyy-MM-ddTHH:mm:ss, no fraction, no zone
    - Prices: fixed-point with exactly two decimals, half-up rounding
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
_CENTS = Decimal("0.01")


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def format_price(value: Decimal | float | int) -> str:
    return str(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))
