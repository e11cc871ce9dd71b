"""Publisher ORM — one-to-many with Item."""

from sqlalchemy import Integer, String, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base


class Publisher(Base):
    __tablename__ = "publishers"
    __table_args__ = (
        CheckConstraint("name <> ''", name="name_not_blank"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    items: Mapped[list["Item"]] = relationship(
        "Item", back_populates="publisher",
    )
