"""Magazine ORM — content facet row keyed by item_id."""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base


class Magazine(Base):
    __tablename__ = "magazines"

    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True,
    )
    is_special_edition: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    item: Mapped["Item"] = relationship("Item", back_populates="magazine")
