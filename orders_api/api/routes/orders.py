"""Order Routes: CRUD over /api/v1/orders with nested items.

Invariants:
    - Invalid ids answer 400 before any query runs
    - Responses always embed the order's items
    - DELETE removes items and order in one transaction
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.domain_types import ItemId, OrderId, Resource
from orders_api.core.identifiers import parse_resource_id
from orders_api.infrastructure.database import get_db
from orders_api.schemas.common import MessageResponse
from orders_api.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from orders_api.services import orders as order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders(db: AsyncSession = Depends(get_db)):
    return await order_service.list_orders(db)


@router.post(
    "", response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate, db: AsyncSession = Depends(get_db),
):
    """Create an order together with its items."""
    return await order_service.create_order(
        db,
        customer_name=body.customer_name,
        ordered_at=body.ordered_at,
        items=[item.model_dump() for item in body.items],
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    oid = OrderId(parse_resource_id(order_id, Resource.ORDER))
    return await order_service.get_order(db, oid)


@router.put("/{order_id}", response_model=MessageResponse)
async def update_order(
    order_id: str, body: OrderUpdate, db: AsyncSession = Depends(get_db),
):
    """Update scalar fields, then each listed item by lineItemId."""
    oid = OrderId(parse_resource_id(order_id, Resource.ORDER))
    await order_service.update_order(
        db, oid, body.changes(),
        [(ItemId(item.line_item_id), item.changes()) for item in body.items],
    )
    return MessageResponse(message="order and items updated")


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(order_id: str, db: AsyncSession = Depends(get_db)):
    oid = OrderId(parse_resource_id(order_id, Resource.ORDER))
    deleted = await order_service.delete_order(db, oid)
    if not deleted:
        logger.warning(
            f"Delete matched no order {oid}",
            extra={"resource": Resource.ORDER.value, "resource_id": oid},
        )
    return MessageResponse(message="order and related items deleted")
