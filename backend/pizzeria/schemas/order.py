"""Order Schemas — pizza ids, customer reference and total.

Invariants:
    - pizzas, customerId, totalPrice required; totalPrice >= 0
    - status is NOT accepted on create (the API stamps "pending")
    - createdAt is response-only; updates naming it are rejected
"""

from datetime import datetime

from pydantic import Field, field_validator

from pizzeria.schemas.common import (
    CamelModel, CamelResponse, CamelUpdateModel,
    require_optional_text, require_present, require_text,
)


class OrderCreate(CamelModel):
    pizzas: list[str]
    customer_id: str
    total_price: float = Field(ge=0)

    @field_validator("customer_id")
    @classmethod
    def strip_customer_id(cls, v: str) -> str:
        return require_text(v)


class OrderUpdate(CamelUpdateModel):
    pizzas: list[str] | None = None
    customer_id: str | None = None
    total_price: float | None = Field(None, ge=0)
    status: str | None = None

    @field_validator("customer_id", "status")
    @classmethod
    def strip_text(cls, v: str | None) -> str:
        return require_optional_text(v)

    @field_validator("pizzas", "total_price")
    @classmethod
    def not_null(cls, v):
        return require_present(v)


class OrderResponse(CamelResponse):
    id: str
    pizzas: list[str]
    customer_id: str
    total_price: float
    status: str
    created_at: datetime
