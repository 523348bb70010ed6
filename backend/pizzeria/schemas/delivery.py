"""Delivery Schemas — courier assignment for an order.

Invariants:
    - orderId and deliveryPerson required and non-blank
    - status and date are stamped by the API on create, editable on update
"""

from datetime import datetime

from pydantic import field_validator

from pizzeria.schemas.common import (
    CamelModel, CamelResponse, CamelUpdateModel,
    require_optional_text, require_text,
)


class DeliveryCreate(CamelModel):
    order_id: str
    delivery_person: str

    @field_validator("order_id", "delivery_person")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return require_text(v)


class DeliveryUpdate(CamelUpdateModel):
    order_id: str | None = None
    delivery_person: str | None = None
    status: str | None = None
    date: datetime | None = None

    @field_validator("order_id", "delivery_person", "status")
    @classmethod
    def strip_text(cls, v: str | None) -> str:
        return require_optional_text(v)


class DeliveryResponse(CamelResponse):
    id: str
    order_id: str
    delivery_person: str
    status: str
    date: datetime | None = None
