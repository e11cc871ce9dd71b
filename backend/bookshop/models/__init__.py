"""ORM Models — SQLAlchemy declarative models for all catalog and order entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Item is the catalog aggregate root (facets, reviews); Order owns its lines and payment

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bookshop.models.publisher import Publisher  # noqa: F401
from bookshop.models.age_category import AgeCategory  # noqa: F401
from bookshop.models.book import Book, book_authors, book_genres  # noqa: F401
from bookshop.models.author import Author  # noqa: F401
from bookshop.models.genre import Genre  # noqa: F401
from bookshop.models.magazine import Magazine  # noqa: F401
from bookshop.models.newspaper import Newspaper  # noqa: F401
from bookshop.models.item import Item  # noqa: F401
from bookshop.models.customer import Customer  # noqa: F401
from bookshop.models.review import Review  # noqa: F401
from bookshop.models.order import Order  # noqa: F401
from bookshop.models.order_item import OrderItem  # noqa: F401
from bookshop.models.payment import Payment  # noqa: F401
