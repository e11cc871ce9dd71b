"""Rating Aggregator — average rating derived from an item's reviews.

Invariants:
    - Empty review set averages to exactly 0
    - No rounding here (display rounding belongs to the presentation layer)
    - Derived on read; never persisted
"""

from typing import Iterable

from bookshop.core.errors import InvalidArgumentError
from bookshop.core.repository_protocols import ReviewLike

MIN_RATING: int = 1
MAX_RATING: int = 5


def average_rating(reviews: Iterable[ReviewLike]) -> float:
    """Arithmetic mean of review ratings, 0.0 when there are none."""
    ratings = [r.rating for r in reviews]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


def validate_rating(rating: int) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidArgumentError("Rating must be an integer", "rating")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidArgumentError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}", "rating",
        )
    return rating


def validate_review_text(text: str, max_length: int) -> str:
    """Strip and bound review text. Same rules on create and update."""
    text = (text or "").strip()
    if not text:
        raise InvalidArgumentError("Review text cannot be empty", "text")
    if len(text) > max_length:
        raise InvalidArgumentError(
            f"Review text exceeds {max_length} characters", "text",
        )
    return text
