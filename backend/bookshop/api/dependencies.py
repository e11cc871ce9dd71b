"""Service Dependencies — FastAPI providers wiring sessions and settings into services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookshop.config import Settings, get_settings
from bookshop.infrastructure.database import get_db
from bookshop.services.cart import CartService
from bookshop.services.catalog_admin import CatalogAdminService
from bookshop.services.catalog_query import CatalogQueryService
from bookshop.services.order_lifecycle import OrderLifecycleService
from bookshop.services.order_query import OrderQueryService
from bookshop.services.reviews import ReviewService


def catalog_query(db: AsyncSession = Depends(get_db)) -> CatalogQueryService:
    return CatalogQueryService(db)


def catalog_admin(db: AsyncSession = Depends(get_db)) -> CatalogAdminService:
    return CatalogAdminService(db)


def order_lifecycle(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> OrderLifecycleService:
    return OrderLifecycleService(
        db, deleted_customer_username=settings.deleted_customer_username,
    )


def order_query(db: AsyncSession = Depends(get_db)) -> OrderQueryService:
    return OrderQueryService(db)


def cart_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CartService:
    return CartService(
        db, settings.cart_expiration_days, settings.deleted_customer_username,
    )


def review_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ReviewService:
    return ReviewService(
        db, settings.review_text_max_length, settings.deleted_customer_username,
    )
