"""Item ORM — sellable catalog entry with a condition tag and an optional content facet.

Invariants:
    - condition_kind tags the condition union; the New payload (is_sealed) and the
      Used payload (used_grade, has_annotations) are mutually exclusive (DB check)
    - price > 0 and stock_quantity >= 0 (DB checks)
    - At most one of book/magazine/newspaper rows exists (enforced when the
      item is built from core.catalog facets; checked on read by classify_content_type)
    - Deleting an item cascades to its content facet, reviews and order lines

Design Decisions:
    - Tag column + nullable payload columns over table inheritance: one row,
      one query, and the check constraint rejects mixed payloads
    - Facets and reviews are selectin-loaded: every view needs them
    - order_lines loaded lazily: only deletion cascades through them
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    Boolean, CheckConstraint, Date, ForeignKey, Integer, Numeric, String, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.core.domain_types import ConditionKind, UsedGrade
from bookshop.db.base import Base
from bookshop.models.enum_column import enum_column_type


class Item(Base):
    """Catalog item — condition axis inline, content axis in facet tables."""
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("stock_quantity >= 0", name="stock_non_negative"),
        CheckConstraint(
            "(condition_kind = 'New' AND is_sealed IS NOT NULL"
            " AND used_grade IS NULL AND has_annotations IS NULL)"
            " OR (condition_kind = 'Used' AND is_sealed IS NULL"
            " AND used_grade IS NOT NULL AND has_annotations IS NOT NULL)",
            name="condition_payload",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    publishing_date: Mapped[date] = mapped_column(Date, nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    publisher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("publishers.id"), nullable=False,
    )
    age_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("age_categories.id"), nullable=False,
    )

    # Condition union: tag + payload
    condition_kind: Mapped[ConditionKind] = mapped_column(
        enum_column_type(ConditionKind, length=10), nullable=False,
    )
    is_sealed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    used_grade: Mapped[UsedGrade | None] = mapped_column(
        enum_column_type(UsedGrade, length=10), nullable=True,
    )
    has_annotations: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Relationships
    publisher: Mapped["Publisher"] = relationship(
        "Publisher", back_populates="items", lazy="selectin",
    )
    age_category: Mapped["AgeCategory"] = relationship(
        "AgeCategory", back_populates="items", lazy="selectin",
    )
    book: Mapped["Book | None"] = relationship(
        "Book", back_populates="item", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    magazine: Mapped["Magazine | None"] = relationship(
        "Magazine", back_populates="item", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    newspaper: Mapped["Newspaper | None"] = relationship(
        "Newspaper", back_populates="item", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="item",
        cascade="all, delete-orphan", lazy="selectin", order_by="Review.id",
    )
    order_lines: Mapped[list["OrderItem"]] = relationship(
        "OrderItem", back_populates="item", cascade="all, delete-orphan",
    )
