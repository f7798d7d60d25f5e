"""Order Persistence: orders with nested line items.

Invariants:
    - Items are always loaded together with their order (selectinload)
    - update_order touches only items that belong to the order and that the
      payload names; everything is committed once or not at all
    - delete_order is one transaction: items first, then the order; any
      failure rolls both back

Design Decisions:
    - Item updates are applied one by one through the ORM (no bulk UPDATE) so
      each item's presence map is honoured individually
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Mapping

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orders_api.core.domain_types import ItemId, OrderId, Resource
from orders_api.core.errors import ResourceNotFoundError
from orders_api.core.partial_update import apply_changes
from orders_api.infrastructure.database import database_operation
from orders_api.models.item import Item
from orders_api.models.order import Order

logger = logging.getLogger(__name__)

ORDER_FIELDS = ("customer_name", "ordered_at")
ITEM_FIELDS = ("item_code", "description", "quantity")


async def list_orders(db: AsyncSession) -> list[Order]:
    query = (
        select(Order)
        .options(selectinload(Order.items))
        .order_by(Order.order_id)
    )
    async with database_operation(db, "failed to get orders", "select"):
        result = await db.execute(query)
    return list(result.scalars().all())


async def create_order(
    db: AsyncSession,
    customer_name: str,
    ordered_at: datetime | None,
    items: Iterable[Mapping],
) -> Order:
    """Persist an order and its items in one commit."""
    order = Order(
        customer_name=customer_name,
        ordered_at=ordered_at or datetime.now(timezone.utc),
        items=[
            Item(**{name: item[name] for name in ITEM_FIELDS if name in item})
            for item in items
        ],
    )
    async with database_operation(db, "failed to create order", "insert"):
        db.add(order)
        await db.commit()
    logger.info(
        f"Order created with {len(order.items)} item(s)",
        extra={"resource": Resource.ORDER.value, "resource_id": order.order_id},
    )
    return order


async def get_order(db: AsyncSession, order_id: OrderId) -> Order:
    """Fetch one order with items or raise ResourceNotFoundError."""
    query = (
        select(Order)
        .where(Order.order_id == order_id)
        .options(selectinload(Order.items))
    )
    async with database_operation(db, "failed to get order", "select"):
        result = await db.execute(query)
    order = result.scalar_one_or_none()
    if order is None:
        raise ResourceNotFoundError(Resource.ORDER.value, order_id)
    return order


async def update_order(
    db: AsyncSession,
    order_id: OrderId,
    changes: dict,
    item_changes: Iterable[tuple[ItemId, dict]] = (),
) -> None:
    """Write present order fields, then each referenced item, then commit once."""
    order = await get_order(db, order_id)
    apply_changes(order, changes, ORDER_FIELDS)

    items_by_id = {item.item_id: item for item in order.items}
    for item_id, fields in item_changes:
        item = items_by_id.get(item_id)
        if item is None:
            await db.rollback()
            raise ResourceNotFoundError(Resource.ITEM.value, item_id)
        apply_changes(item, fields, ITEM_FIELDS)

    async with database_operation(db, "failed to update order", "update"):
        await db.commit()
    logger.info(
        "Order and items updated",
        extra={"resource": Resource.ORDER.value, "resource_id": order_id},
    )


async def delete_order(db: AsyncSession, order_id: OrderId) -> int:
    """Delete an order's items and then the order, atomically.

    Returns the number of order rows removed (0 when the id did not exist).
    """
    async with database_operation(
        db, "failed to delete items related to order", "delete",
    ):
        items_result = await db.execute(
            delete(Item).where(Item.order_id == order_id),
        )
    async with database_operation(db, "failed to delete order", "delete"):
        result = await db.execute(
            delete(Order).where(Order.order_id == order_id),
        )
        await db.commit()
    logger.info(
        f"Order delete executed ({items_result.rowcount} item(s))",
        extra={
            "resource": Resource.ORDER.value, "resource_id": order_id,
            "affected_rows": result.rowcount,
        },
    )
    return result.rowcount
