"""Genre ORM — many-to-many with Book via book_genres."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base
from bookshop.models.book import book_genres


class Genre(Base):
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    books: Mapped[list["Book"]] = relationship(
        "Book", secondary=book_genres, back_populates="genres",
    )
