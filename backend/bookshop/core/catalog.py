"""Catalog Entity Model — two-axis item classification as explicit tagged unions.

Invariants:
    - Condition axis: every item is exactly one of NewCondition | UsedCondition
    - Content axis: every item is at most one of BookContent | MagazineContent |
      NewspaperContent (None = typeless)
    - Facet constructors validate their payload and raise InvalidArgumentError
    - classify_* inspect a persisted item and raise ConflictingStateError when the
      stored tag and payload disagree (data corruption is surfaced, never patched)

Design Decisions:
    - Frozen dataclasses as union members: a facet cannot be half-built, so a
      new item cannot reach the store with zero or two condition payloads
    - classify_* kept for rows written outside this code path (migrations, SQL)
"""

from dataclasses import dataclass
from decimal import Decimal

from bookshop.core.domain_types import (
    ConditionKind, ContentType, CoverType, UsedGrade,
)
from bookshop.core.errors import ConflictingStateError, InvalidArgumentError
from bookshop.core.repository_protocols import AuthorLike, ItemLike

MAX_NEWSPAPER_TOPICS: int = 10


# ─── Condition facet ─────────────────────────────────────────────

@dataclass(frozen=True)
class NewCondition:
    is_sealed: bool

    @property
    def kind(self) -> ConditionKind:
        return ConditionKind.NEW


@dataclass(frozen=True)
class UsedCondition:
    grade: UsedGrade
    has_annotations: bool

    def __post_init__(self):
        if not isinstance(self.grade, UsedGrade):
            try:
                object.__setattr__(self, "grade", UsedGrade(self.grade))
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown used-item grade: {self.grade!r}", "grade",
                )

    @property
    def kind(self) -> ConditionKind:
        return ConditionKind.USED


ConditionFacet = NewCondition | UsedCondition


# ─── Content facet ───────────────────────────────────────────────

@dataclass(frozen=True)
class BookContent:
    pages: int
    cover: CoverType
    author_ids: tuple[int, ...] = ()
    genre_ids: tuple[int, ...] = ()

    def __post_init__(self):
        if isinstance(self.pages, bool) or not isinstance(self.pages, int) or self.pages < 1:
            raise InvalidArgumentError(
                "Book must have at least one page", "pages",
            )
        if not isinstance(self.cover, CoverType):
            try:
                object.__setattr__(self, "cover", CoverType(self.cover))
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown cover type: {self.cover!r}", "cover",
                )
        object.__setattr__(self, "author_ids", tuple(dict.fromkeys(self.author_ids)))
        object.__setattr__(self, "genre_ids", tuple(dict.fromkeys(self.genre_ids)))

    @property
    def content_type(self) -> ContentType:
        return ContentType.BOOK


@dataclass(frozen=True)
class MagazineContent:
    is_special_edition: bool

    @property
    def content_type(self) -> ContentType:
        return ContentType.MAGAZINE


@dataclass(frozen=True)
class NewspaperContent:
    headline: str
    topics: tuple[str, ...]

    def __post_init__(self):
        headline = (self.headline or "").strip()
        if not headline:
            raise InvalidArgumentError("Headline cannot be empty", "headline")
        topics = tuple(t.strip() for t in self.topics)
        if not 1 <= len(topics) <= MAX_NEWSPAPER_TOPICS:
            raise InvalidArgumentError(
                f"Newspaper needs 1-{MAX_NEWSPAPER_TOPICS} topics, got {len(topics)}",
                "topics",
            )
        if any(not t for t in topics):
            raise InvalidArgumentError("Topics cannot be blank", "topics")
        object.__setattr__(self, "headline", headline)
        object.__setattr__(self, "topics", topics)

    @property
    def content_type(self) -> ContentType:
        return ContentType.NEWSPAPER


ContentFacet = BookContent | MagazineContent | NewspaperContent | None


# ─── Classification of persisted items ───────────────────────────

def classify_condition(item: ItemLike) -> ConditionKind:
    """Return the item's condition tag. Raises ConflictingStateError on a bad payload."""
    try:
        kind = ConditionKind(item.condition_kind)
    except ValueError:
        raise ConflictingStateError(
            item.id, f"unknown condition tag {item.condition_kind!r}",
        )

    has_new = item.is_sealed is not None
    has_used = item.used_grade is not None or item.has_annotations is not None

    if kind == ConditionKind.NEW and (not has_new or has_used):
        raise ConflictingStateError(item.id, "new item with used-condition payload")
    if kind == ConditionKind.USED and (
        has_new or item.used_grade is None or item.has_annotations is None
    ):
        raise ConflictingStateError(item.id, "used item with incomplete condition payload")
    return kind


def classify_content_type(item: ItemLike) -> ContentType | None:
    """Return which content facet is attached, or None. Two or more is a defect."""
    present = [
        content_type for content_type, facet in (
            (ContentType.BOOK, item.book),
            (ContentType.MAGAZINE, item.magazine),
            (ContentType.NEWSPAPER, item.newspaper),
        )
        if facet is not None
    ]
    if len(present) > 1:
        raise ConflictingStateError(
            item.id,
            "multiple content facets: " + ", ".join(p.value for p in present),
        )
    return present[0] if present else None


def condition_facet_of(item: ItemLike) -> ConditionFacet:
    """Rebuild the condition union member from a persisted item."""
    if classify_condition(item) == ConditionKind.NEW:
        return NewCondition(is_sealed=bool(item.is_sealed))
    return UsedCondition(
        grade=UsedGrade(item.used_grade),
        has_annotations=bool(item.has_annotations),
    )


# ─── Field rules ─────────────────────────────────────────────────

def validate_item_fields(name: str, price: Decimal, stock_quantity: int) -> None:
    """Base-attribute preconditions shared by create and update."""
    if not name or not name.strip():
        raise InvalidArgumentError("Item name cannot be empty", "name")
    if Decimal(price) <= 0:
        raise InvalidArgumentError("Price must be positive", "price")
    if isinstance(stock_quantity, bool) or not isinstance(stock_quantity, int) or stock_quantity < 0:
        raise InvalidArgumentError(
            "Stock quantity must be a non-negative integer", "stock_quantity",
        )


def author_display_name(author: AuthorLike) -> str:
    """Pseudonym wins over the legal name."""
    return author.pseudonym or f"{author.name} {author.surname}"
