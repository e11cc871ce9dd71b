"""Entity Store — SQLAlchemy implementation of core.repository_protocols.EntityStore.

Invariants:
    - load() never returns None: a missing id raises NotFoundError
    - conditional_update() is ONE statement (UPDATE ... WHERE id AND guard);
      it is the only write path for contended counters and statuses
    - unit_of_work() commits on success and rolls back on ANY exception,
      so a service operation is all-or-nothing

Design Decisions:
    - Thin generic store over per-entity repositories: every entity needs the
      same five primitives; entity-specific filters are passed as clauses
    - save()/delete() flush immediately so generated ids and FK errors surface
      inside the caller's unit of work
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, TypeVar

from sqlalchemy import exists as sa_exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect

from bookshop.core.errors import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _primary_key(model: type) -> Any:
    return inspect(model).primary_key[0]


class SqlAlchemyStore:
    """Load/save/delete/exists/filtered_scan over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, model: type[T], entity_id: Any) -> T | None:
        return await self.db.get(model, entity_id, populate_existing=True)

    async def load(self, model: type[T], entity_id: Any) -> T:
        entity = await self.get(model, entity_id)
        if entity is None:
            raise NotFoundError(model.__name__, entity_id)
        return entity

    async def save(self, entity: Any) -> None:
        self.db.add(entity)
        await self.db.flush()

    async def delete(self, entity: Any) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    async def exists(self, model: type, entity_id: Any) -> bool:
        result = await self.db.execute(
            select(sa_exists().where(_primary_key(model) == entity_id)),
        )
        return bool(result.scalar())

    async def filtered_scan(self, model: type[T], *criteria: Any) -> list[T]:
        query = (
            select(model).where(*criteria)
            .order_by(_primary_key(model))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return list(result.scalars().unique().all())

    async def scalar(self, statement: Any) -> Any:
        result = await self.db.execute(statement)
        return result.scalar_one_or_none()

    async def conditional_update(
        self, model: type, entity_id: Any, guard: Any, values: dict,
    ) -> bool:
        """Apply values iff the row exists and guard holds. True when a row matched."""
        result = await self.db.execute(
            update(model)
            .where(_primary_key(model) == entity_id)
            .where(guard)
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncGenerator[SqlAlchemyStore, None]:
    """Commit on success, roll back on any exception and re-raise."""
    store = SqlAlchemyStore(db)
    try:
        yield store
        await db.commit()
    except BaseException:
        await db.rollback()
        raise
