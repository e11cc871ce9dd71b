"""Rating Aggregator — average rating and review field rules."""

from dataclasses import dataclass

import pytest

from bookshop.core.errors import InvalidArgumentError
from bookshop.core.rating import average_rating, validate_rating, validate_review_text


@dataclass
class _Review:
    rating: int


def test_no_reviews_averages_to_zero():
    assert average_rating([]) == 0


def test_average_of_ratings():
    assert average_rating([_Review(5), _Review(3)]) == 4.0


def test_average_is_not_rounded():
    assert average_rating([_Review(5), _Review(4), _Review(4)]) == pytest.approx(13 / 3)


@pytest.mark.parametrize("rating", [0, 6, True, "5"])
def test_invalid_ratings_rejected(rating):
    with pytest.raises(InvalidArgumentError):
        validate_rating(rating)


def test_review_text_is_stripped_and_bounded():
    assert validate_review_text("  great  ", 10) == "great"
    with pytest.raises(InvalidArgumentError):
        validate_review_text("   ", 10)
    with pytest.raises(InvalidArgumentError):
        validate_review_text("x" * 11, 10)
