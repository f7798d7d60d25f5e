"""Order Schemas: nested order/item bodies for /api/v1/orders.

Invariants:
    - Wire keys: orderId, customerName, orderedAt, items[].lineItemId/itemCode/description/quantity
    - Item.order_id is never serialized
    - 0 <= quantity <= INT32_MAX (the range of the Integer column)
    - Ids sent on create are ignored; item updates must name a lineItemId

Design Decisions:
    - `alias` for request bodies, `serialization_alias` for responses: the same
      python names map onto ORM attributes in both directions
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from orders_api.core.domain_types import INT32_MAX
from orders_api.schemas.common import PartialUpdate


def as_utc(value: datetime) -> datetime:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


# --- Requests -----------------------------------------------------------------

class ItemCreate(BaseModel):
    """Line item inside an order creation body."""
    model_config = ConfigDict(populate_by_name=True)

    item_code: str = Field("", alias="itemCode")
    description: str = ""
    quantity: int = Field(0, ge=0, le=INT32_MAX)


class OrderCreate(BaseModel):
    """Order creation body with nested items."""
    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(alias="customerName")
    ordered_at: UtcDatetime | None = Field(None, alias="orderedAt")
    items: list[ItemCreate] = Field(default_factory=list)


class ItemUpdate(PartialUpdate):
    """Update for one existing item, addressed by lineItemId."""
    model_config = ConfigDict(populate_by_name=True)

    line_item_id: int = Field(alias="lineItemId", ge=1, le=INT32_MAX)
    item_code: str | None = Field(None, alias="itemCode")
    description: str | None = None
    quantity: int | None = Field(None, ge=0, le=INT32_MAX)

    def changes(self) -> dict:
        """Present item fields, excluding the addressing id."""
        fields = super().changes()
        fields.pop("line_item_id", None)
        return fields


class OrderUpdate(PartialUpdate):
    """Order update body: scalar fields plus per-item updates."""
    model_config = ConfigDict(populate_by_name=True)

    customer_name: str | None = Field(None, alias="customerName")
    ordered_at: UtcDatetime | None = Field(None, alias="orderedAt")
    items: list[ItemUpdate] = Field(default_factory=list)

    def changes(self) -> dict:
        """Present scalar order fields; items are applied separately."""
        fields = super().changes()
        fields.pop("items", None)
        return fields


# --- Responses ----------------------------------------------------------------

class ItemResponse(BaseModel):
    """Line item as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    item_id: int = Field(serialization_alias="lineItemId")
    item_code: str = Field(serialization_alias="itemCode")
    description: str
    quantity: int


class OrderResponse(BaseModel):
    """Order with its items as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    order_id: int = Field(serialization_alias="orderId")
    customer_name: str = Field(serialization_alias="customerName")
    ordered_at: UtcDatetime = Field(serialization_alias="orderedAt")
    items: list[ItemResponse] = Field(default_factory=list)
