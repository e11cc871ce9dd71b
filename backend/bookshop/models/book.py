"""Book ORM — content facet row keyed by item_id.

Invariants:
    - pages >= 1 (DB check)
    - Deleting the item deletes the facet row and its author/genre links
"""

from sqlalchemy import Column, ForeignKey, Integer, Table, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.core.domain_types import CoverType
from bookshop.db.base import Base
from bookshop.models.enum_column import enum_column_type

book_authors = Table(
    "book_authors",
    Base.metadata,
    Column(
        "book_id", Integer,
        ForeignKey("books.item_id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "author_id", Integer,
        ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
    ),
)

book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id", Integer,
        ForeignKey("books.item_id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "genre_id", Integer,
        ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class Book(Base):
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("pages >= 1", name="pages_positive"),
    )

    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True,
    )
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    cover: Mapped[CoverType] = mapped_column(
        enum_column_type(CoverType), nullable=False,
    )

    item: Mapped["Item"] = relationship("Item", back_populates="book")
    authors: Mapped[list["Author"]] = relationship(
        "Author", secondary=book_authors, back_populates="books",
        lazy="selectin", order_by="Author.id",
    )
    genres: Mapped[list["Genre"]] = relationship(
        "Genre", secondary=book_genres, back_populates="books",
        lazy="selectin", order_by="Genre.id",
    )
