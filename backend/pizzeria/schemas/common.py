"""Shared schema building blocks — camelCase base models and string checks.

Invariants:
    - Every model accepts both camelCase (wire) and snake_case (Python) names
    - Required strings are stripped; blank counts as missing
    - Update models forbid unknown keys, so store-assigned fields (id, createdAt)
      are rejected before reaching the store

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for all resources
    - from_attributes on responses: store dataclasses serialize directly
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request bodies — camelCase on the wire, extra keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelUpdateModel(BaseModel):
    """Base for partial updates — unknown keys rejected."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by Python name."""
        return self.model_dump(exclude_unset=True)


class CamelResponse(BaseModel):
    """Base for response payloads built from store entities."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


def require_text(v: str) -> str:
    """Strip and reject blank strings."""
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


def require_optional_text(v: str | None) -> str:
    """Like require_text, but for update fields: explicit null is rejected too."""
    if v is None:
        raise ValueError("cannot be null")
    return require_text(v)


def require_present(v):
    """Reject explicit null on update fields that are never nullable."""
    if v is None:
        raise ValueError("cannot be null")
    return v
