"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId, OrderId, CustomerId, ... wrap ints; never mix them in domain logic
    - All closed sets (status, condition, cover, payment) encoded as Enums
    - Enum values are the strings existing clients already receive ("Confirmed", "Mint")

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)
OrderId = NewType("OrderId", int)
CustomerId = NewType("CustomerId", int)
PublisherId = NewType("PublisherId", int)
AgeCategoryId = NewType("AgeCategoryId", int)
AuthorId = NewType("AuthorId", int)
GenreId = NewType("GenreId", int)
ReviewId = NewType("ReviewId", int)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle states — maps to DB `status` column."""
    CART = "Cart"
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PREPARATION = "Preparation"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class ConditionKind(str, Enum):
    """Condition axis tag. Exactly one per item."""
    NEW = "New"
    USED = "Used"


class ContentType(str, Enum):
    """Content axis tag. At most one per item (None = typeless)."""
    BOOK = "Book"
    MAGAZINE = "Magazine"
    NEWSPAPER = "Newspaper"


class UsedGrade(str, Enum):
    """Physical grade of a used item."""
    MINT = "Mint"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class CoverType(str, Enum):
    HARD = "Hard"
    SOFT = "Soft"
    SPIRAL_BOUND = "SpiralBound"


class PaymentType(str, Enum):
    CARD = "Card"
    APPLE_PAY = "ApplePay"
    GOOGLE_PAY = "GooglePay"
    BLIK = "Blik"
