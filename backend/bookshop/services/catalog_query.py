"""Catalog Query — item lookup, filtered listings and item deletion.

Invariants:
    - Every listing is sorted by ascending item id
    - Filtering by a publisher/age category/author/genre that does not exist
      raises NotFoundError rather than returning an empty list
    - delete() of a missing id raises NotFoundError and writes nothing;
      an existing item is removed with its facets, reviews and order lines
    - A conflicting facet combination surfaces as ConflictingStateError
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.cart_rules import validate_age
from bookshop.core.errors import NotFoundError
from bookshop.infrastructure.store import SqlAlchemyStore, unit_of_work
from bookshop.models import AgeCategory, Author, Book, Genre, Item, Publisher
from bookshop.schemas.item import ItemSummary, ItemView, StockLevel
from bookshop.services.inventory_ledger import InventoryLedger
from bookshop.services.views import item_summary, item_view

logger = logging.getLogger(__name__)


class CatalogQueryService:
    """Read side of the catalog plus deletion."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = SqlAlchemyStore(db)

    async def get_by_id(self, item_id: int) -> ItemView:
        item = await self.store.load(Item, item_id)
        return item_view(item)

    async def stock_level(self, item_id: int) -> StockLevel:
        level = await InventoryLedger(self.store).stock_level(item_id)
        return StockLevel(item_id=item_id, stock_quantity=level)

    async def list_all(self) -> list[ItemSummary]:
        return await self._list()

    async def list_by_publisher(self, publisher_id: int) -> list[ItemSummary]:
        await self._require(Publisher, publisher_id)
        return await self._list(Item.publisher_id == publisher_id)

    async def list_by_age_category(self, age_category_id: int) -> list[ItemSummary]:
        await self._require(AgeCategory, age_category_id)
        return await self._list(Item.age_category_id == age_category_id)

    async def list_appropriate_for_age(self, age: int) -> list[ItemSummary]:
        validate_age(age)
        return await self._list(
            Item.age_category.has(AgeCategory.minimum_age <= age),
        )

    async def list_by_author(self, author_id: int) -> list[ItemSummary]:
        await self._require(Author, author_id)
        return await self._list(
            Item.book.has(Book.authors.any(Author.id == author_id)),
        )

    async def list_by_genre(self, genre_id: int) -> list[ItemSummary]:
        await self._require(Genre, genre_id)
        return await self._list(
            Item.book.has(Book.genres.any(Genre.id == genre_id)),
        )

    async def delete(self, item_id: int) -> None:
        async with unit_of_work(self.db) as store:
            item = await store.load(Item, item_id)
            await store.delete(item)
        logger.info(f"Item {item_id} deleted", extra={"item_id": item_id})

    # ─── helpers ─────────────────────────────────────────────────

    async def _require(self, model: type, entity_id: int) -> None:
        if not await self.store.exists(model, entity_id):
            raise NotFoundError(model.__name__, entity_id)

    async def _list(self, *criteria) -> list[ItemSummary]:
        items = await self.store.filtered_scan(Item, *criteria)
        return [item_summary(item) for item in items]
