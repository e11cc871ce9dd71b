"""Item Routes — catalog browsing, item administration and stock adjustment.

Invariants:
    - Listings are sorted by item id; filters are mutually exclusive query params
    - Stock only moves through the increase/decrease endpoints
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from bookshop.api.dependencies import catalog_admin, catalog_query, order_query
from bookshop.core.errors import InvalidArgumentError
from bookshop.schemas.item import (
    ItemCreate, ItemSummary, ItemUpdate, ItemView, StockAdjustment, StockLevel,
)
from bookshop.schemas.order import OrderSummary
from bookshop.services.catalog_admin import CatalogAdminService
from bookshop.services.catalog_query import CatalogQueryService
from bookshop.services.order_query import OrderQueryService

router = APIRouter(prefix="/api/v1/items", tags=["items"])


@router.get("", response_model=list[ItemSummary])
async def list_items(
    publisher_id: int | None = Query(None),
    age_category_id: int | None = Query(None),
    age: int | None = Query(None),
    author_id: int | None = Query(None),
    genre_id: int | None = Query(None),
    service: CatalogQueryService = Depends(catalog_query),
):
    """List items, optionally narrowed by exactly one filter."""
    filters = {
        "publisher_id": publisher_id, "age_category_id": age_category_id,
        "age": age, "author_id": author_id, "genre_id": genre_id,
    }
    given = [name for name, value in filters.items() if value is not None]
    if len(given) > 1:
        raise InvalidArgumentError(
            "Only one filter may be given at a time", ",".join(given),
        )
    if publisher_id is not None:
        return await service.list_by_publisher(publisher_id)
    if age_category_id is not None:
        return await service.list_by_age_category(age_category_id)
    if age is not None:
        return await service.list_appropriate_for_age(age)
    if author_id is not None:
        return await service.list_by_author(author_id)
    if genre_id is not None:
        return await service.list_by_genre(genre_id)
    return await service.list_all()


@router.post("", response_model=ItemView, status_code=status.HTTP_201_CREATED)
async def create_item(
    body: ItemCreate, service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.create_item(body)


@router.get("/{item_id}", response_model=ItemView)
async def get_item(
    item_id: int, service: CatalogQueryService = Depends(catalog_query),
):
    return await service.get_by_id(item_id)


@router.patch("/{item_id}", response_model=ItemView)
async def update_item(
    item_id: int, body: ItemUpdate,
    service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.update_item(item_id, body)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: int, service: CatalogQueryService = Depends(catalog_query),
):
    await service.delete(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{item_id}/stock", response_model=StockLevel)
async def get_stock(
    item_id: int, service: CatalogQueryService = Depends(catalog_query),
):
    return await service.stock_level(item_id)


@router.post("/{item_id}/stock/increase", response_model=StockLevel)
async def increase_stock(
    item_id: int, body: StockAdjustment,
    service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.increase_stock(item_id, body.amount)


@router.post("/{item_id}/stock/decrease", response_model=StockLevel)
async def decrease_stock(
    item_id: int, body: StockAdjustment,
    service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.decrease_stock(item_id, body.amount)


@router.get("/{item_id}/orders", response_model=list[OrderSummary])
async def orders_for_item(
    item_id: int, service: OrderQueryService = Depends(order_query),
):
    return await service.orders_for_item(item_id)
