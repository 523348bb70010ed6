"""Entities — the five record types held by the store.

Invariants:
    - Entities are plain dataclasses: no IO, no validation, no back-references
    - id is assigned by the store, never by callers
    - Order.created_at is stamped once by the store and never changed by update
    - Pizza.ingredients holds ingredient NAMES, not ingredient ids

Design Decisions:
    - Mutable dataclasses with field-wise equality: get_by_id(e.id) == e is a
      plain comparison in tests
    - Container fields default to fresh lists (field(default_factory=list))
"""

from dataclasses import dataclass, field
from datetime import datetime


IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


@dataclass
class Pizza:
    id: str
    name: str
    ingredients: list[str] = field(default_factory=list)
    price: float = 0.0


@dataclass
class Ingredient:
    id: str
    name: str
    allergens: list[str] = field(default_factory=list)
    availability: bool = True


@dataclass
class Customer:
    id: str
    name: str
    address: str
    phone: str


@dataclass
class Order:
    id: str
    customer_id: str
    created_at: datetime
    pizzas: list[str] = field(default_factory=list)
    total_price: float = 0.0
    status: str = ""


@dataclass
class Delivery:
    id: str
    order_id: str
    delivery_person: str
    status: str = ""
    date: datetime | None = None
