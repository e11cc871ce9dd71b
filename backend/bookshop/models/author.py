"""Author ORM — many-to-many with Book via book_authors."""

from datetime import date

from sqlalchemy import Integer, String, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.db.base import Base
from bookshop.models.book import book_authors


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    surname: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    pseudonym: Mapped[str | None] = mapped_column(String(100), nullable=True)

    books: Mapped[list["Book"]] = relationship(
        "Book", secondary=book_authors, back_populates="authors",
    )
