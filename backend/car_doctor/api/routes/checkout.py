"""Checkout Routes — service orders owned by the signed-in email.

Invariants:
    - GET /checkout is protected: the `email` query must equal the token's email,
      otherwise 401 "Unauthorized Access Forbidden" (a missing query never matches)
    - PATCH /checkout/{id} sets only `status`, from body field `approved`
    - DELETE /checkout/{id} on an unknown id answers deletedCount 0
"""

from bson import ObjectId
from fastapi import APIRouter, Depends, Query

from car_doctor.api.dependencies import (
    document_id, get_orders, log_request, verify_token,
)
from car_doctor.core.errors import IdentityMismatchError
from car_doctor.schemas.checkout import OrderCreate, OrderStatusUpdate
from car_doctor.services.orders import OrderBook

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.get("", dependencies=[Depends(log_request)])
async def list_orders(
    email: str | None = Query(None),
    user: dict = Depends(verify_token),
    orders: OrderBook = Depends(get_orders),
):
    """Orders placed by the authenticated user."""
    if not email or email != user.get("email"):
        raise IdentityMismatchError()
    return await orders.list_for_email(email)


@router.post("")
async def submit_order(
    body: OrderCreate, orders: OrderBook = Depends(get_orders),
):
    return await orders.submit(body.to_document())


@router.patch("/{id}")
async def update_order_status(
    body: OrderStatusUpdate,
    order_id: ObjectId = Depends(document_id),
    orders: OrderBook = Depends(get_orders),
):
    return await orders.set_status(order_id, body.approved)


@router.delete("/{id}")
async def cancel_order(
    order_id: ObjectId = Depends(document_id),
    orders: OrderBook = Depends(get_orders),
):
    return await orders.cancel(order_id)
