"""AgeCategory ORM — gates item visibility by minimum age.

Invariants:
    - 0 <= minimum_age <= 100 (DB check)
    - Items reference exactly one age category
"""

from sqlalchemy import Integer, String, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base


class AgeCategory(Base):
    __tablename__ = "age_categories"
    __table_args__ = (
        CheckConstraint(
            "minimum_age BETWEEN 0 AND 100", name="minimum_age_range",
        ),
        CheckConstraint("tag <> ''", name="tag_not_blank"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tag: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    minimum_age: Mapped[int] = mapped_column(Integer, nullable=False)

    items: Mapped[list["Item"]] = relationship(
        "Item", back_populates="age_category",
    )
