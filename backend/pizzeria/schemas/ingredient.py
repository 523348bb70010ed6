"""Ingredient Schemas — only the name is required; allergens default empty, availability true.

Allergens are a set of names: repeats are dropped on the way in, keeping the
order in which each name first appeared.
"""

from pydantic import field_validator

from pizzeria.schemas.common import (
    CamelModel, CamelResponse, CamelUpdateModel,
    require_optional_text, require_present, require_text,
)


def unique_names(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


class IngredientCreate(CamelModel):
    name: str
    allergens: list[str] = []
    availability: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return require_text(v)

    @field_validator("allergens")
    @classmethod
    def dedupe_allergens(cls, v: list[str]) -> list[str]:
        return unique_names(v)


class IngredientUpdate(CamelUpdateModel):
    name: str | None = None
    allergens: list[str] | None = None
    availability: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        return require_optional_text(v)

    @field_validator("allergens")
    @classmethod
    def dedupe_allergens(cls, v: list[str] | None) -> list[str]:
        return unique_names(require_present(v))

    @field_validator("availability")
    @classmethod
    def not_null(cls, v):
        return require_present(v)


class IngredientResponse(CamelResponse):
    id: str
    name: str
    allergens: list[str]
    availability: bool
