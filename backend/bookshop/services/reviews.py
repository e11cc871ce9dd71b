"""Review Service — customer reviews feeding the item's average rating.

Invariants:
    - Rating 1..5 and non-blank, length-bounded text on create AND update
    - One review per (customer, item); a second one is rejected
    - The deleted-customer placeholder cannot review
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.core.errors import InvalidArgumentError
from bookshop.core.rating import validate_rating, validate_review_text
from bookshop.infrastructure.clock import utc_now
from bookshop.infrastructure.store import SqlAlchemyStore, unit_of_work
from bookshop.models import Customer, Item, Review
from bookshop.schemas.review import ReviewView
from bookshop.services.views import review_view

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(
        self,
        db: AsyncSession,
        text_max_length: int,
        deleted_customer_username: str,
        now: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        self.text_max_length = text_max_length
        self.deleted_customer_username = deleted_customer_username
        self.now = now

    async def add_review(
        self, item_id: int, customer_id: int, rating: int, text: str,
    ) -> ReviewView:
        rating = validate_rating(rating)
        text = validate_review_text(text, self.text_max_length)
        async with unit_of_work(self.db) as store:
            item = await store.load(Item, item_id)
            customer = await store.load(Customer, customer_id)
            if customer.username == self.deleted_customer_username:
                raise InvalidArgumentError(
                    "Deleted customer cannot write reviews", "customer_id",
                )
            existing = await store.filtered_scan(
                Review, Review.item_id == item_id, Review.customer_id == customer_id,
            )
            if existing:
                raise InvalidArgumentError(
                    f"Customer {customer_id} already reviewed item {item_id}",
                    "customer_id",
                )
            review = Review(
                item=item, customer=customer, rating=rating, text=text,
                created_at=self.now(),
            )
            await store.save(review)
            view = review_view(review)
        logger.info(
            f"Review {view.id} added",
            extra={"item_id": item_id, "customer_id": customer_id},
        )
        return view

    async def update_review(self, review_id: int, rating: int, text: str) -> ReviewView:
        rating = validate_rating(rating)
        text = validate_review_text(text, self.text_max_length)
        async with unit_of_work(self.db) as store:
            review = await store.load(Review, review_id)
            review.rating = rating
            review.text = text
            await store.save(review)
            view = review_view(review)
        return view

    async def delete_review(self, review_id: int) -> None:
        async with unit_of_work(self.db) as store:
            review = await store.load(Review, review_id)
            await store.delete(review)
        logger.info(f"Review {review_id} deleted")

    async def reviews_for_item(self, item_id: int) -> list[ReviewView]:
        store = SqlAlchemyStore(self.db)
        item = await store.load(Item, item_id)
        return [review_view(r) for r in item.reviews]
