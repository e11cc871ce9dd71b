"""Catalog Admin — creation of reference data and items, base-attribute updates.

Invariants:
    - An item is built from exactly one condition facet and at most one content
      facet (core.catalog); the payload is re-validated there
    - Referenced publisher, age category, authors and genres must exist
    - Stock is only set at creation; later changes go through InventoryLedger

Design Decisions:
    - Items are reloaded after flush so the returned view carries the
      selectin-loaded facets exactly as a later read would
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.catalog import (
    BookContent, MagazineContent, NewCondition, NewspaperContent,
    validate_item_fields,
)
from bookshop.core.errors import NotFoundError
from bookshop.infrastructure.store import SqlAlchemyStore, unit_of_work
from bookshop.models import (
    AgeCategory, Author, Book, Genre, Item, Magazine, Newspaper, Publisher,
)
from bookshop.schemas.catalog import (
    AgeCategoryCreate, AgeCategoryView, AuthorCreate, AuthorView,
    GenreCreate, GenreView, PublisherCreate, PublisherView,
)
from bookshop.schemas.item import ItemCreate, ItemUpdate, ItemView, StockLevel
from bookshop.services.inventory_ledger import InventoryLedger
from bookshop.services.views import item_view

logger = logging.getLogger(__name__)


class CatalogAdminService:
    """Write side of the catalog."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_publisher(self, payload: PublisherCreate) -> PublisherView:
        publisher = Publisher(**payload.model_dump())
        async with unit_of_work(self.db) as store:
            await store.save(publisher)
        return PublisherView.model_validate(publisher)

    async def create_age_category(self, payload: AgeCategoryCreate) -> AgeCategoryView:
        category = AgeCategory(**payload.model_dump())
        async with unit_of_work(self.db) as store:
            await store.save(category)
        return AgeCategoryView.model_validate(category)

    async def create_author(self, payload: AuthorCreate) -> AuthorView:
        author = Author(**payload.model_dump())
        async with unit_of_work(self.db) as store:
            await store.save(author)
        return AuthorView.model_validate(author)

    async def create_genre(self, payload: GenreCreate) -> GenreView:
        genre = Genre(**payload.model_dump())
        async with unit_of_work(self.db) as store:
            await store.save(genre)
        return GenreView.model_validate(genre)

    async def create_item(self, payload: ItemCreate) -> ItemView:
        condition = payload.to_condition_facet()
        content = payload.to_content_facet()
        validate_item_fields(payload.name, payload.price, payload.stock_quantity)

        async with unit_of_work(self.db) as store:
            await self._require(store, Publisher, payload.publisher_id)
            await self._require(store, AgeCategory, payload.age_category_id)

            item = Item(
                name=payload.name,
                description=payload.description,
                image_url=payload.image_url,
                publishing_date=payload.publishing_date,
                language=payload.language,
                price=payload.price,
                stock_quantity=payload.stock_quantity,
                publisher_id=payload.publisher_id,
                age_category_id=payload.age_category_id,
                condition_kind=condition.kind,
            )
            if isinstance(condition, NewCondition):
                item.is_sealed = condition.is_sealed
            else:
                item.used_grade = condition.grade
                item.has_annotations = condition.has_annotations

            if isinstance(content, BookContent):
                item.book = Book(
                    pages=content.pages,
                    cover=content.cover,
                    authors=await self._load_all(store, Author, content.author_ids),
                    genres=await self._load_all(store, Genre, content.genre_ids),
                )
            elif isinstance(content, MagazineContent):
                item.magazine = Magazine(is_special_edition=content.is_special_edition)
            elif isinstance(content, NewspaperContent):
                item.newspaper = Newspaper(
                    headline=content.headline, topics=list(content.topics),
                )

            await store.save(item)
            item = await store.load(Item, item.id)
            view = item_view(item)

        logger.info(f"Item {item.id} created", extra={"item_id": item.id})
        return view

    async def update_item(self, item_id: int, payload: ItemUpdate) -> ItemView:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        async with unit_of_work(self.db) as store:
            item = await store.load(Item, item_id)
            for attr, value in changes.items():
                setattr(item, attr, value.strip() if isinstance(value, str) else value)
            validate_item_fields(item.name, item.price, item.stock_quantity)
            await store.save(item)
            item = await store.load(Item, item_id)
            view = item_view(item)

        logger.info(f"Item {item_id} updated", extra={"item_id": item_id})
        return view

    async def increase_stock(self, item_id: int, amount: int) -> StockLevel:
        async with unit_of_work(self.db) as store:
            level = await InventoryLedger(store).increase_stock(item_id, amount)
        return StockLevel(item_id=item_id, stock_quantity=level)

    async def decrease_stock(self, item_id: int, amount: int) -> StockLevel:
        async with unit_of_work(self.db) as store:
            level = await InventoryLedger(store).decrease_stock(item_id, amount)
        return StockLevel(item_id=item_id, stock_quantity=level)

    # ─── helpers ─────────────────────────────────────────────────

    @staticmethod
    async def _require(store: SqlAlchemyStore, model: type, entity_id: int) -> None:
        if not await store.exists(model, entity_id):
            raise NotFoundError(model.__name__, entity_id)

    @staticmethod
    async def _load_all(store: SqlAlchemyStore, model: type, ids: tuple[int, ...]) -> list:
        return [await store.load(model, entity_id) for entity_id in ids]
