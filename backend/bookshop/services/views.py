"""View Builders — map loaded ORM entities to schema views via the pure core.

Invariants:
    - Every derived field comes from core (average_rating, total_price,
      last_updated_at); nothing is read from a stored aggregate
    - Facets are resolved through classify_* so corrupt rows raise
      ConflictingStateError instead of rendering half an item
"""

from bookshop.core.catalog import (
    NewCondition, author_display_name, classify_content_type, condition_facet_of,
)
from bookshop.core.domain_types import ContentType
from bookshop.core.order_lifecycle import last_updated_at, total_price
from bookshop.core.rating import average_rating
from bookshop.models.item import Item
from bookshop.models.order import Order
from bookshop.models.review import Review
from bookshop.schemas.item import ItemSummary, ItemView, ReviewSummary
from bookshop.schemas.order import (
    CartView, OrderLineView, OrderSummary, OrderView, PaymentView,
)
from bookshop.schemas.review import ReviewView


def _book_people(item: Item, content_type: ContentType | None) -> tuple[list[str] | None, list[str] | None]:
    if content_type != ContentType.BOOK:
        return None, None
    authors = [author_display_name(a) for a in item.book.authors]
    genres = [g.name for g in item.book.genres]
    return authors, genres


def item_summary(item: Item) -> ItemSummary:
    content_type = classify_content_type(item)
    authors, genres = _book_people(item, content_type)
    return ItemSummary(
        id=item.id,
        name=item.name,
        image_url=item.image_url,
        price=item.price,
        publisher_name=item.publisher.name,
        average_rating=average_rating(item.reviews),
        authors=authors,
        genres=genres,
    )


def review_summary(review: Review) -> ReviewSummary:
    return ReviewSummary(
        id=review.id,
        customer_id=review.customer_id,
        username=review.customer.username,
        rating=review.rating,
        text=review.text,
        created_at=review.created_at,
    )


def item_view(item: Item) -> ItemView:
    content_type = classify_content_type(item)
    condition = condition_facet_of(item)
    authors, genres = _book_people(item, content_type)

    view = ItemView(
        id=item.id,
        name=item.name,
        image_url=item.image_url,
        price=item.price,
        publisher_name=item.publisher.name,
        average_rating=average_rating(item.reviews),
        authors=authors,
        genres=genres,
        description=item.description,
        publishing_date=item.publishing_date,
        language=item.language,
        stock_quantity=item.stock_quantity,
        publisher_id=item.publisher_id,
        age_category_id=item.age_category_id,
        minimum_age=item.age_category.minimum_age,
        reviews=[review_summary(r) for r in item.reviews],
        content_type=content_type,
        condition_kind=condition.kind,
        is_used=not isinstance(condition, NewCondition),
    )

    if isinstance(condition, NewCondition):
        view.is_sealed = condition.is_sealed
    else:
        view.grade = condition.grade
        view.has_annotations = condition.has_annotations

    if content_type == ContentType.BOOK:
        view.pages = item.book.pages
        view.cover = item.book.cover
    elif content_type == ContentType.MAGAZINE:
        view.is_special_edition = item.magazine.is_special_edition
    elif content_type == ContentType.NEWSPAPER:
        view.headline = item.newspaper.headline
        view.topics = list(item.newspaper.topics)
    return view


def order_summary(order: Order) -> OrderSummary:
    return OrderSummary(
        id=order.id,
        status=order.status,
        total_price=total_price(order),
        last_updated_at=last_updated_at(order),
        customer_id=order.customer_id,
    )


def _lines(order: Order) -> list[OrderLineView]:
    return [
        OrderLineView(item=item_summary(line.item), quantity=line.quantity)
        for line in order.lines
    ]


def order_view(order: Order) -> OrderView:
    payment = None
    if order.payment is not None:
        payment = PaymentView(
            payment_type=order.payment.payment_type,
            amount=order.payment.amount,
            paid_at=order.payment.paid_at,
        )
    return OrderView(
        id=order.id,
        status=order.status,
        customer_id=order.customer_id,
        total_price=total_price(order),
        created_at=order.created_at,
        confirmed_at=order.confirmed_at,
        preparation_started_at=order.preparation_started_at,
        shipped_at=order.shipped_at,
        delivered_at=order.delivered_at,
        cancelled_at=order.cancelled_at,
        last_updated_at=last_updated_at(order),
        payment=payment,
        lines=_lines(order),
    )


def cart_view(order: Order) -> CartView:
    return CartView(
        id=order.id,
        customer_id=order.customer_id,
        created_at=order.created_at,
        total_price=total_price(order),
        lines=_lines(order),
    )


def review_view(review: Review) -> ReviewView:
    return ReviewView(
        id=review.id,
        item_id=review.item_id,
        item_name=review.item.name,
        customer_id=review.customer_id,
        username=review.customer.username,
        rating=review.rating,
        text=review.text,
        created_at=review.created_at,
    )
