"""Order schemas: camelCase wire keys and presence-map updates.

Invariants:
    - Requests accept camelCase keys; responses emit them
    - ItemUpdate.changes() excludes the addressing id and unset fields
"""

from datetime import datetime, timezone, timedelta
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from orders_api.schemas.order import (
    ItemUpdate, OrderCreate, OrderResponse, OrderUpdate,
)


def test_order_create_reads_camel_case():
    body = OrderCreate.model_validate({
        "customerName": "Ann",
        "items": [{"itemCode": "X-1", "description": "Thing", "quantity": 2}],
    })
    assert body.customer_name == "Ann"
    assert body.ordered_at is None
    assert body.items[0].model_dump() == {
        "item_code": "X-1", "description": "Thing", "quantity": 2,
    }


def test_ordered_at_normalised_to_utc():
    body = OrderCreate.model_validate({
        "customerName": "Ann", "orderedAt": "2024-05-01T12:00:00+02:00",
    })
    assert body.ordered_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert body.ordered_at.utcoffset() == timedelta(0)


def test_item_update_changes_keeps_zero_quantity():
    update = ItemUpdate.model_validate({"lineItemId": 3, "quantity": 0})
    assert update.line_item_id == 3
    assert update.changes() == {"quantity": 0}


def test_item_update_requires_positive_line_item_id():
    with pytest.raises(ValidationError):
        ItemUpdate.model_validate({"lineItemId": 0})


def test_item_update_rejects_negative_quantity():
    with pytest.raises(ValidationError):
        ItemUpdate.model_validate({"lineItemId": 1, "quantity": -2})


def test_order_update_changes_excludes_items_and_unset():
    update = OrderUpdate.model_validate({
        "customerName": "Bo",
        "items": [{"lineItemId": 1, "description": ""}],
    })
    assert update.changes() == {"customer_name": "Bo"}
    assert update.items[0].changes() == {"description": ""}


def test_order_response_emits_wire_keys():
    order = SimpleNamespace(
        order_id=5, customer_name="Cy",
        ordered_at=datetime(2024, 1, 2, 3, 4, 5),
        items=[SimpleNamespace(
            item_id=8, item_code="Q", description="d", quantity=1, order_id=5,
        )],
    )
    dumped = OrderResponse.model_validate(order).model_dump(by_alias=True)
    assert set(dumped) == {"orderId", "customerName", "orderedAt", "items"}
    assert dumped["orderedAt"].tzinfo == timezone.utc
    assert dumped["items"] == [{
        "lineItemId": 8, "itemCode": "Q", "description": "d", "quantity": 1,
    }]


def test_item_create_rejects_quantity_beyond_column_range():
    with pytest.raises(ValidationError):
        OrderCreate.model_validate({
            "customerName": "Ann",
            "items": [{"itemCode": "Q", "quantity": 2**31}],
        })


def test_item_update_rejects_quantity_beyond_column_range():
    with pytest.raises(ValidationError):
        ItemUpdate.model_validate({"lineItemId": 1, "quantity": 99999999999999999999})


def test_item_update_accepts_largest_storable_quantity():
    update = ItemUpdate.model_validate({"lineItemId": 1, "quantity": 2**31 - 1})
    assert update.changes() == {"quantity": 2**31 - 1}
