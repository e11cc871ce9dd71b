"""Review Routes — item reviews."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from bookshop.api.dependencies import review_service
from bookshop.schemas.review import ReviewCreate, ReviewUpdate, ReviewView
from bookshop.services.reviews import ReviewService

router = APIRouter(prefix="/api/v1", tags=["reviews"])


@router.get("/items/{item_id}/reviews", response_model=list[ReviewView])
async def list_reviews(
    item_id: int, service: ReviewService = Depends(review_service),
):
    return await service.reviews_for_item(item_id)


@router.post(
    "/items/{item_id}/reviews", response_model=ReviewView,
    status_code=status.HTTP_201_CREATED,
)
async def add_review(
    item_id: int, body: ReviewCreate,
    service: ReviewService = Depends(review_service),
):
    return await service.add_review(item_id, body.customer_id, body.rating, body.text)


@router.put("/reviews/{review_id}", response_model=ReviewView)
async def update_review(
    review_id: int, body: ReviewUpdate,
    service: ReviewService = Depends(review_service),
):
    return await service.update_review(review_id, body.rating, body.text)


@router.delete("/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(
    review_id: int, service: ReviewService = Depends(review_service),
):
    await service.delete_review(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
