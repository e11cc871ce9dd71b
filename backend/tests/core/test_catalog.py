"""Catalog Entity Model — facet construction and classification of stored items.

Tests:
    - Facet constructors validate payload (pages, grade, cover, topics, headline)
    - classify_condition/classify_content_type accept every valid combination
    - Corrupt rows (mixed or missing payloads, two content facets) raise ConflictingStateError
"""

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from bookshop.core.catalog import (
    BookContent, MagazineContent, NewCondition, NewspaperContent, UsedCondition,
    author_display_name, classify_condition, classify_content_type,
    condition_facet_of, validate_item_fields,
)
from bookshop.core.domain_types import (
    ConditionKind, ContentType, CoverType, UsedGrade,
)
from bookshop.core.errors import ConflictingStateError, InvalidArgumentError


@dataclass
class _Item:
    id: int = 1
    condition_kind: ConditionKind = ConditionKind.NEW
    is_sealed: bool | None = True
    used_grade: UsedGrade | None = None
    has_annotations: bool | None = None
    book: object | None = None
    magazine: object | None = None
    newspaper: object | None = None
    reviews: list = field(default_factory=list)


@dataclass
class _Author:
    name: str
    surname: str
    pseudonym: str | None = None


# ─── facets ──────────────────────────────────────────────────────

def test_new_condition_kind():
    assert NewCondition(is_sealed=False).kind == ConditionKind.NEW


def test_used_condition_coerces_grade():
    facet = UsedCondition(grade="Mint", has_annotations=True)
    assert facet.grade is UsedGrade.MINT
    assert facet.kind == ConditionKind.USED


def test_used_condition_rejects_unknown_grade():
    with pytest.raises(InvalidArgumentError) as exc:
        UsedCondition(grade="Shiny", has_annotations=False)
    assert exc.value.field == "grade"


@pytest.mark.parametrize("pages", [0, -3, True])
def test_book_rejects_bad_page_count(pages):
    with pytest.raises(InvalidArgumentError):
        BookContent(pages=pages, cover=CoverType.HARD)


def test_book_coerces_cover_and_dedups_ids():
    book = BookContent(pages=120, cover="SpiralBound", author_ids=(3, 1, 3))
    assert book.cover is CoverType.SPIRAL_BOUND
    assert book.author_ids == (3, 1)
    assert book.content_type == ContentType.BOOK


def test_magazine_content_type():
    assert MagazineContent(is_special_edition=True).content_type == ContentType.MAGAZINE


def test_newspaper_strips_headline_and_topics():
    paper = NewspaperContent(headline="  Big news ", topics=(" politics ", "sport"))
    assert paper.headline == "Big news"
    assert paper.topics == ("politics", "sport")


@pytest.mark.parametrize("topics", [(), tuple(f"t{i}" for i in range(11)), ("ok", "  ")])
def test_newspaper_rejects_bad_topics(topics):
    with pytest.raises(InvalidArgumentError) as exc:
        NewspaperContent(headline="Headline", topics=topics)
    assert exc.value.field == "topics"


def test_newspaper_rejects_blank_headline():
    with pytest.raises(InvalidArgumentError):
        NewspaperContent(headline="   ", topics=("a",))


# ─── classification ──────────────────────────────────────────────

def test_classify_new_item():
    assert classify_condition(_Item()) == ConditionKind.NEW


def test_classify_used_item():
    item = _Item(
        condition_kind=ConditionKind.USED, is_sealed=None,
        used_grade=UsedGrade.FAIR, has_annotations=False,
    )
    assert classify_condition(item) == ConditionKind.USED
    assert condition_facet_of(item) == UsedCondition(UsedGrade.FAIR, False)


def test_new_item_with_used_payload_conflicts():
    with pytest.raises(ConflictingStateError):
        classify_condition(_Item(used_grade=UsedGrade.GOOD, has_annotations=True))


def test_used_item_without_grade_conflicts():
    item = _Item(condition_kind=ConditionKind.USED, is_sealed=None, has_annotations=True)
    with pytest.raises(ConflictingStateError):
        classify_condition(item)


@pytest.mark.parametrize("facets,expected", [
    ({}, None),
    ({"book": object()}, ContentType.BOOK),
    ({"magazine": object()}, ContentType.MAGAZINE),
    ({"newspaper": object()}, ContentType.NEWSPAPER),
])
def test_classify_content_type(facets, expected):
    assert classify_content_type(_Item(**facets)) == expected


def test_two_content_facets_conflict():
    item = _Item(book=object(), magazine=object())
    with pytest.raises(ConflictingStateError) as exc:
        classify_content_type(item)
    assert exc.value.http_status == 500
    assert exc.value.item_id == 1


# ─── field rules ─────────────────────────────────────────────────

def test_validate_item_fields_accepts_valid():
    validate_item_fields("Dune", Decimal("9.99"), 0)


@pytest.mark.parametrize("name,price,stock,field_name", [
    (" ", Decimal("1"), 0, "name"),
    ("Dune", Decimal("0"), 0, "price"),
    ("Dune", Decimal("1"), -1, "stock_quantity"),
])
def test_validate_item_fields_rejects(name, price, stock, field_name):
    with pytest.raises(InvalidArgumentError) as exc:
        validate_item_fields(name, price, stock)
    assert exc.value.field == field_name


def test_author_display_name_prefers_pseudonym():
    assert author_display_name(_Author("Eric", "Blair", "George Orwell")) == "George Orwell"
    assert author_display_name(_Author("Jane", "Austen")) == "Jane Austen"
