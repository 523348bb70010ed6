"""Domain Types — rich types that replace bare primitives across the store.

Invariants:
    - PizzaId, IngredientId, CustomerId, OrderId, DeliveryId wrap str — ids are opaque strings
    - Every timestamp produced by the domain is timezone-aware UTC
    - Known status values encoded as Enums, but entity status stays free-form

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Status kept as plain str on entities: callers may assign any value on update
"""

from datetime import datetime, timezone
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PizzaId = NewType("PizzaId", str)
IngredientId = NewType("IngredientId", str)
CustomerId = NewType("CustomerId", str)
OrderId = NewType("OrderId", str)
DeliveryId = NewType("DeliveryId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The five collections held by the store."""
    PIZZA = "pizza"
    INGREDIENT = "ingredient"
    CUSTOMER = "customer"
    ORDER = "order"
    DELIVERY = "delivery"

    @property
    def label(self) -> str:
        """Display name used in user-facing messages ("Pizza", "Order", ...)."""
        return self.value.capitalize()


class OrderStatus(str, Enum):
    """Status stamped on new orders by the HTTP layer."""
    PENDING = "pending"


class DeliveryStatus(str, Enum):
    """Status stamped on new deliveries by the HTTP layer."""
    ASSIGNED = "assigned"


class IdStrategy(str, Enum):
    """Id generation strategies selectable through settings."""
    COUNTER = "counter"
    UUID = "uuid"
    TIMESTAMP = "timestamp"


def utc_now() -> datetime:
    """Default store clock."""
    return datetime.now(timezone.utc)
