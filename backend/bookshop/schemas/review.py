"""Review Schemas — shape checks only; rating/text rules live in core.rating."""

from pydantic import BaseModel, Field

from bookshop.schemas.wire import Timestamp


class ReviewCreate(BaseModel):
    customer_id: int
    rating: int
    text: str = Field(max_length=2000)


class ReviewUpdate(BaseModel):
    rating: int
    text: str = Field(max_length=2000)


class ReviewView(BaseModel):
    id: int
    item_id: int
    item_name: str
    customer_id: int
    username: str
    rating: int
    text: str
    created_at: Timestamp
