"""Pydantic schemas for order event payloads"""

import json
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from domain.orders.models import OrderItem


class OrderItemPayload(BaseModel):
    """Serialized form of an order item inside tracked events"""
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

    id: str
    price: Decimal
    in_stock: bool = Field(..., serialization_alias="inStock")
    delivery: dict[str, Any] = Field(default_factory=dict)

    @field_serializer("delivery")
    def serialize_delivery(self, delivery: dict[str, Any]) -> dict[str, Any]:
        """Delivery attributes are opaque; values without a JSON form are stringified"""
        return json.loads(json.dumps(delivery, default=str))


def order_item_event_payload(order_id: str, item: OrderItem) -> dict[str, Any]:
    """Build the ``{orderId, orderItem}`` payload for item mutation events.

    Prices serialize as strings so no precision is lost in the sink.
    """
    return {
        "orderId": order_id,
        "orderItem": OrderItemPayload.model_validate(item).model_dump(mode="json", by_alias=True),
    }
