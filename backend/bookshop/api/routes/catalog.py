"""Catalog Reference Routes — publishers, age categories, authors and genres."""

from fastapi import APIRouter, Depends, status

from bookshop.api.dependencies import catalog_admin
from bookshop.schemas.catalog import (
    AgeCategoryCreate, AgeCategoryView, AuthorCreate, AuthorView,
    GenreCreate, GenreView, PublisherCreate, PublisherView,
)
from bookshop.services.catalog_admin import CatalogAdminService

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.post(
    "/publishers", response_model=PublisherView,
    status_code=status.HTTP_201_CREATED,
)
async def create_publisher(
    body: PublisherCreate, service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.create_publisher(body)


@router.post(
    "/age-categories", response_model=AgeCategoryView,
    status_code=status.HTTP_201_CREATED,
)
async def create_age_category(
    body: AgeCategoryCreate, service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.create_age_category(body)


@router.post(
    "/authors", response_model=AuthorView,
    status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorCreate, service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.create_author(body)


@router.post(
    "/genres", response_model=GenreView,
    status_code=status.HTTP_201_CREATED,
)
async def create_genre(
    body: GenreCreate, service: CatalogAdminService = Depends(catalog_admin),
):
    return await service.create_genre(body)
