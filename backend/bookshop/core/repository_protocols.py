"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Pure core functions accept *Like protocols, so ORM rows and plain test
      doubles are interchangeable
    - EntityStore is the only persistence surface services depend on

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in EntityStore: implementations do IO, but the pure functions that
      consume loaded entities are never async themselves
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol, Sequence, TypeVar

T = TypeVar("T")


# ─── Entity shapes read by pure core functions ───────────────────

class ReviewLike(Protocol):
    rating: int


class AuthorLike(Protocol):
    name: str
    surname: str
    pseudonym: str | None


class BookLike(Protocol):
    pages: int
    cover: Any
    authors: Sequence[AuthorLike]
    genres: Sequence[Any]


class MagazineLike(Protocol):
    is_special_edition: bool


class NewspaperLike(Protocol):
    headline: str
    topics: list[str]


class ItemLike(Protocol):
    """Structural contract for a persisted item and its facets."""
    id: int
    price: Decimal
    stock_quantity: int
    condition_kind: Any
    is_sealed: bool | None
    used_grade: Any
    has_annotations: bool | None
    book: BookLike | None
    magazine: MagazineLike | None
    newspaper: NewspaperLike | None
    reviews: Sequence[ReviewLike]


class PricedItemLike(Protocol):
    price: Decimal


class OrderLineLike(Protocol):
    quantity: int
    item: PricedItemLike


class OrderLike(Protocol):
    """Structural contract for Order objects passed to the lifecycle engine."""
    status: Any
    created_at: datetime
    confirmed_at: datetime | None
    preparation_started_at: datetime | None
    shipped_at: datetime | None
    delivered_at: datetime | None
    cancelled_at: datetime | None
    lines: Sequence[OrderLineLike]


# ─── Persistence collaborator ────────────────────────────────────

class EntityStore(Protocol):
    """Contract for entity persistence, implemented by the shell."""
    async def load(self, model: type[T], entity_id: Any) -> T: ...
    async def save(self, entity: Any) -> None: ...
    async def delete(self, entity: Any) -> None: ...
    async def exists(self, model: type, entity_id: Any) -> bool: ...
    async def filtered_scan(self, model: type[T], *criteria: Any) -> list[T]: ...
    async def scalar(self, statement: Any) -> Any: ...
    async def conditional_update(
        self, model: type, entity_id: Any, guard: Any, values: dict,
    ) -> bool: ...
