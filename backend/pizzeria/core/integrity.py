"""Integrity Report — read-only scan for references the store does not guard.

Invariants:
    - Pure read: never mutates, never repairs
    - Deterministic order: collections scanned pizza -> order -> delivery,
      entities in insertion order, fields in declaration order

Design Decisions:
    - Reports the two known gaps instead of closing them: ingredients have no
      delete guard, and update() never re-validates foreign keys. Both are
      observed behaviour, so they are surfaced, not changed
"""

from dataclasses import dataclass

from pizzeria.core.domain_types import EntityKind
from pizzeria.core.entity_store import EntityStore


@dataclass(frozen=True)
class DanglingReference:
    """One field value on `source` that does not resolve in `target`."""
    source: EntityKind
    source_id: str
    field: str
    target: EntityKind
    missing: str


def find_dangling_references(store: EntityStore) -> list[DanglingReference]:
    found: list[DanglingReference] = []
    ingredient_names = {i.name for i in store.ingredients.list_all()}

    for pizza in store.pizzas.list_all():
        for name in pizza.ingredients:
            if name not in ingredient_names:
                found.append(DanglingReference(
                    EntityKind.PIZZA, pizza.id, "ingredients",
                    EntityKind.INGREDIENT, name,
                ))

    for order in store.orders.list_all():
        if order.customer_id not in store.customers:
            found.append(DanglingReference(
                EntityKind.ORDER, order.id, "customer_id",
                EntityKind.CUSTOMER, order.customer_id,
            ))
        for pizza_id in order.pizzas:
            if pizza_id not in store.pizzas:
                found.append(DanglingReference(
                    EntityKind.ORDER, order.id, "pizzas",
                    EntityKind.PIZZA, pizza_id,
                ))

    for delivery in store.deliveries.list_all():
        if delivery.order_id not in store.orders:
            found.append(DanglingReference(
                EntityKind.DELIVERY, delivery.id, "order_id",
                EntityKind.ORDER, delivery.order_id,
            ))

    return found
