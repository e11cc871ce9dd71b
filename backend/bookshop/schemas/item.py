"""Item Schemas — creation payloads and read views for catalog items.

Invariants:
    - ItemCreate.condition is a discriminated union on `kind` (New | Used)
    - ItemCreate.content is a discriminated union on `type` (Book | Magazine |
      Newspaper) or null; a payload can never carry two content facets
    - to_condition_facet()/to_content_facet() hand the payload to core.catalog,
      which re-validates it

Design Decisions:
    - Literal discriminators over a free `type` string: Pydantic rejects unknown
      variants before the service sees them
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from bookshop.core.catalog import (
    BookContent, ConditionFacet, ContentFacet, MagazineContent,
    NewCondition, NewspaperContent, UsedCondition, MAX_NEWSPAPER_TOPICS,
)
from bookshop.core.domain_types import (
    ConditionKind, ContentType, CoverType, UsedGrade,
)
from bookshop.schemas.wire import Price, Timestamp


# --- Creation payloads --------------------------------------------------------

class NewConditionIn(BaseModel):
    kind: Literal["New"] = "New"
    is_sealed: bool = True


class UsedConditionIn(BaseModel):
    kind: Literal["Used"] = "Used"
    grade: UsedGrade
    has_annotations: bool = False


class BookIn(BaseModel):
    type: Literal["Book"] = "Book"
    pages: int = Field(ge=1)
    cover: CoverType
    author_ids: list[int] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)


class MagazineIn(BaseModel):
    type: Literal["Magazine"] = "Magazine"
    is_special_edition: bool = False


class NewspaperIn(BaseModel):
    type: Literal["Newspaper"] = "Newspaper"
    headline: str = Field(min_length=1, max_length=300)
    topics: list[str] = Field(min_length=1, max_length=MAX_NEWSPAPER_TOPICS)


ConditionIn = Annotated[NewConditionIn | UsedConditionIn, Field(discriminator="kind")]
ContentIn = Annotated[BookIn | MagazineIn | NewspaperIn, Field(discriminator="type")]


class ItemCreate(BaseModel):
    """Item creation — base attributes plus exactly one condition, at most one content."""
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    image_url: str = Field("", max_length=500)
    publishing_date: date
    language: str = Field(min_length=1, max_length=50)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    stock_quantity: int = Field(0, ge=0)
    publisher_id: int
    age_category_id: int
    condition: ConditionIn
    content: ContentIn | None = None

    @field_validator("name", "language")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    def to_condition_facet(self) -> ConditionFacet:
        if isinstance(self.condition, UsedConditionIn):
            return UsedCondition(
                grade=self.condition.grade,
                has_annotations=self.condition.has_annotations,
            )
        return NewCondition(is_sealed=self.condition.is_sealed)

    def to_content_facet(self) -> ContentFacet:
        content = self.content
        if isinstance(content, BookIn):
            return BookContent(
                pages=content.pages,
                cover=content.cover,
                author_ids=tuple(content.author_ids),
                genre_ids=tuple(content.genre_ids),
            )
        if isinstance(content, MagazineIn):
            return MagazineContent(is_special_edition=content.is_special_edition)
        if isinstance(content, NewspaperIn):
            return NewspaperContent(
                headline=content.headline, topics=tuple(content.topics),
            )
        return None


class ItemUpdate(BaseModel):
    """Partial update of base attributes. Stock moves only through the ledger."""
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    language: str | None = Field(None, min_length=1, max_length=50)
    price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)


class StockAdjustment(BaseModel):
    amount: int = Field(gt=0)


class StockLevel(BaseModel):
    item_id: int
    stock_quantity: int


# --- Views --------------------------------------------------------------------

class ReviewSummary(BaseModel):
    id: int
    customer_id: int
    username: str
    rating: int
    text: str
    created_at: Timestamp


class ItemSummary(BaseModel):
    """List-row shape: enough to render a catalog tile."""
    id: int
    name: str
    image_url: str
    price: Price
    publisher_name: str
    average_rating: float
    authors: list[str] | None = None
    genres: list[str] | None = None


class ItemView(ItemSummary):
    """Full item detail with both facets resolved."""
    description: str
    publishing_date: date
    language: str
    stock_quantity: int
    publisher_id: int
    age_category_id: int
    minimum_age: int
    reviews: list[ReviewSummary]
    content_type: ContentType | None
    pages: int | None = None
    cover: CoverType | None = None
    is_special_edition: bool | None = None
    headline: str | None = None
    topics: list[str] | None = None
    condition_kind: ConditionKind
    is_used: bool
    is_sealed: bool | None = None
    grade: UsedGrade | None = None
    has_annotations: bool | None = None
