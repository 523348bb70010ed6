"""Pizza Schemas — menu item payloads.

Invariants:
    - name required and non-blank; ingredients required (names, may be empty); price >= 0
"""

from pydantic import Field, field_validator

from pizzeria.schemas.common import (
    CamelModel, CamelResponse, CamelUpdateModel,
    require_optional_text, require_present, require_text,
)


class PizzaCreate(CamelModel):
    name: str
    ingredients: list[str]
    price: float = Field(ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return require_text(v)


class PizzaUpdate(CamelUpdateModel):
    name: str | None = None
    ingredients: list[str] | None = None
    price: float | None = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        return require_optional_text(v)

    @field_validator("ingredients", "price")
    @classmethod
    def not_null(cls, v):
        return require_present(v)


class PizzaResponse(CamelResponse):
    id: str
    name: str
    ingredients: list[str]
    price: float
