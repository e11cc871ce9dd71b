"""Item Schemas — discriminated facet payloads and their core facets."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from bookshop.core.catalog import BookContent, NewCondition, NewspaperContent, UsedCondition
from bookshop.core.domain_types import CoverType, UsedGrade
from bookshop.schemas.item import ItemCreate
from bookshop.schemas.order import OrderSummary


def _payload(**overrides) -> dict:
    base = {
        "name": " Dune ",
        "publishing_date": "1965-08-01",
        "language": "English",
        "price": "9.99",
        "publisher_id": 1,
        "age_category_id": 1,
        "condition": {"kind": "New"},
    }
    base.update(overrides)
    return base


def test_new_condition_defaults_to_sealed():
    item = ItemCreate.model_validate(_payload())
    assert item.name == "Dune"
    assert item.to_condition_facet() == NewCondition(is_sealed=True)
    assert item.to_content_facet() is None


def test_used_condition_facet():
    item = ItemCreate.model_validate(_payload(condition={"kind": "Used", "grade": "Poor"}))
    assert item.to_condition_facet() == UsedCondition(UsedGrade.POOR, False)


def test_book_content_facet():
    item = ItemCreate.model_validate(_payload(
        content={"type": "Book", "pages": 412, "cover": "Hard", "author_ids": [2, 2]},
    ))
    facet = item.to_content_facet()
    assert isinstance(facet, BookContent)
    assert facet.cover is CoverType.HARD
    assert facet.author_ids == (2,)


def test_newspaper_content_facet():
    item = ItemCreate.model_validate(_payload(
        content={"type": "Newspaper", "headline": "Moon landing", "topics": ["space"]},
    ))
    assert item.to_content_facet() == NewspaperContent("Moon landing", ("space",))


@pytest.mark.parametrize("overrides", [
    {"condition": {"kind": "Refurbished"}},
    {"content": {"type": "Comic"}},
    {"content": {"type": "Book", "pages": 0, "cover": "Hard"}},
    {"content": {"type": "Newspaper", "headline": "x", "topics": []}},
    {"price": "0"},
    {"name": "   "},
])
def test_invalid_payloads_rejected(overrides):
    with pytest.raises(ValidationError):
        ItemCreate.model_validate(_payload(**overrides))


def test_order_summary_wire_format():
    summary = OrderSummary(
        id=1, status="Confirmed", total_price=Decimal("25.5"),
        last_updated_at="2026-03-04T05:06:07.123", customer_id=2,
    )
    dumped = summary.model_dump(mode="json")
    assert dumped["total_price"] == "25.50"
    assert dumped["last_updated_at"] == "2026-03-04T05:06:07"
    assert dumped["status"] == "Confirmed"
