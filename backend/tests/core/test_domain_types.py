"""Domain Types — verifies identity wrappers, enum values and the default clock.

Tests:
    - NewType wrappers are transparent str
    - EntityKind has exactly the five collections
    - Stamped statuses serialize to their wire values
    - utc_now is timezone-aware
"""

from datetime import timezone

from pizzeria.core.domain_types import (
    CustomerId, DeliveryId, IngredientId, OrderId, PizzaId,
    DeliveryStatus, EntityKind, IdStrategy, OrderStatus, utc_now,
)


def test_identity_types_wrap_str():
    assert PizzaId("1") == "1"
    assert IngredientId("2") == "2"
    assert CustomerId("3") == "3"
    assert OrderId("4") == "4"
    assert DeliveryId("5") == "5"


def test_entity_kind_has_five_collections():
    assert [k.value for k in EntityKind] == [
        "pizza", "ingredient", "customer", "order", "delivery",
    ]


def test_entity_kind_label_is_capitalized():
    assert EntityKind.PIZZA.label == "Pizza"
    assert EntityKind.DELIVERY.label == "Delivery"


def test_stamped_statuses():
    assert OrderStatus.PENDING.value == "pending"
    assert DeliveryStatus.ASSIGNED.value == "assigned"


def test_id_strategy_accepts_config_strings():
    assert IdStrategy("counter") is IdStrategy.COUNTER
    assert IdStrategy("uuid") is IdStrategy.UUID
    assert IdStrategy("timestamp") is IdStrategy.TIMESTAMP


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo == timezone.utc
