"""Cart Routes — the customer's open cart."""

from fastapi import APIRouter, Depends

from bookshop.api.dependencies import cart_service
from bookshop.schemas.order import CartItemAdd, CartQuantityUpdate, CartView
from bookshop.services.cart import CartService

router = APIRouter(prefix="/api/v1/customers/{customer_id}/cart", tags=["carts"])


@router.get("", response_model=CartView)
async def get_cart(customer_id: int, service: CartService = Depends(cart_service)):
    return await service.get_cart(customer_id)


@router.post("/items", response_model=CartView)
async def add_item(
    customer_id: int, body: CartItemAdd,
    service: CartService = Depends(cart_service),
):
    return await service.add_item(customer_id, body.item_id, body.quantity)


@router.put("/items/{item_id}", response_model=CartView)
async def update_quantity(
    customer_id: int, item_id: int, body: CartQuantityUpdate,
    service: CartService = Depends(cart_service),
):
    return await service.update_quantity(customer_id, item_id, body.quantity)


@router.delete("/items/{item_id}", response_model=CartView)
async def remove_item(
    customer_id: int, item_id: int,
    service: CartService = Depends(cart_service),
):
    return await service.remove_item(customer_id, item_id)
