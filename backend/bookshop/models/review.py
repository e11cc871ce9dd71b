"""Review ORM — one customer's rating and text for one item.

Invariants:
    - 1 <= rating <= 5 (DB check, re-validated by core.rating on create and update)
    - One review per (customer, item)
"""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint, DateTime, ForeignKey, Integer, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base
from bookshop.infrastructure.clock import utc_now


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
        CheckConstraint("text <> ''", name="text_not_blank"),
        UniqueConstraint("customer_id", "item_id", name="uq_reviews_customer_item"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False,
    )
    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now,
    )

    item: Mapped["Item"] = relationship(
        "Item", back_populates="reviews", lazy="selectin",
    )
    customer: Mapped["Customer"] = relationship("Customer", lazy="selectin")
