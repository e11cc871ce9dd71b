"""Order Routes — order queries and lifecycle transitions.

Invariants:
    - Illegal transitions answer 409 with the order untouched
    - Confirmation carries the payment type; stock is taken at that moment
"""

from fastapi import APIRouter, Depends, Query

from bookshop.api.dependencies import order_lifecycle, order_query
from bookshop.core.domain_types import OrderStatus
from bookshop.schemas.item import ItemSummary
from bookshop.schemas.order import (
    ConfirmOrder, OrderSummary, OrderView, StatusChange,
)
from bookshop.services.order_lifecycle import OrderLifecycleService
from bookshop.services.order_query import OrderQueryService

router = APIRouter(prefix="/api/v1", tags=["orders"])


@router.get("/orders", response_model=list[OrderSummary])
async def list_orders(
    status: OrderStatus | None = Query(None),
    service: OrderQueryService = Depends(order_query),
):
    return await service.list_orders(status)


@router.get("/orders/{order_id}", response_model=OrderView)
async def get_order(
    order_id: int, service: OrderQueryService = Depends(order_query),
):
    return await service.order_detail(order_id)


@router.get("/orders/{order_id}/items", response_model=list[ItemSummary])
async def items_in_order(
    order_id: int, service: OrderQueryService = Depends(order_query),
):
    return await service.items_in_order(order_id)


@router.get("/customers/{customer_id}/orders", response_model=list[OrderSummary])
async def orders_for_customer(
    customer_id: int, service: OrderQueryService = Depends(order_query),
):
    return await service.orders_for_customer(customer_id)


@router.post("/orders/{order_id}/checkout", response_model=OrderView)
async def checkout(
    order_id: int, service: OrderLifecycleService = Depends(order_lifecycle),
):
    return await service.checkout(order_id)


@router.post("/orders/{order_id}/confirm", response_model=OrderView)
async def confirm(
    order_id: int, body: ConfirmOrder,
    service: OrderLifecycleService = Depends(order_lifecycle),
):
    return await service.confirm(order_id, body.payment_type)


@router.post("/orders/{order_id}/cancel", response_model=OrderView)
async def cancel(
    order_id: int, service: OrderLifecycleService = Depends(order_lifecycle),
):
    return await service.cancel(order_id)


@router.put("/orders/{order_id}/status", response_model=OrderView)
async def change_status(
    order_id: int, body: StatusChange,
    service: OrderLifecycleService = Depends(order_lifecycle),
):
    return await service.transition(order_id, body.status)


@router.post("/customers/{customer_id}/orders/assign-to-deleted")
async def assign_orders_to_deleted_customer(
    customer_id: int, service: OrderLifecycleService = Depends(order_lifecycle),
):
    moved = await service.assign_orders_to_deleted_customer(customer_id)
    return {"customer_id": customer_id, "orders_moved": moved}
