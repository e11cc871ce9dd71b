"""Newspaper ORM — content facet row keyed by item_id.

Invariants:
    - topics is an ordered list of 1-10 non-blank strings (validated by
      core.catalog.NewspaperContent before insert)

Design Decisions:
    - JSON column for topics: ordered list stored as-is, no join table
"""

from sqlalchemy import ForeignKey, Integer, String, JSON, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base


class Newspaper(Base):
    __tablename__ = "newspapers"
    __table_args__ = (
        CheckConstraint("headline <> ''", name="headline_not_blank"),
    )

    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True,
    )
    headline: Mapped[str] = mapped_column(String(300), nullable=False)
    topics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    item: Mapped["Item"] = relationship("Item", back_populates="newspaper")
