"""Entity Store — in-memory relational store for the five pizzeria collections.

Invariants:
    - Ids are assigned here, unique within their collection, never caller-supplied
    - Referential preconditions run on create ONLY (update never re-validates)
    - A failed create inserts nothing; a failed delete removes nothing
    - Not-found is a return value (None / False), never an exception
    - Order.created_at comes from the store clock and is never changed by update
    - No logging, no retries: every failure is a deterministic function of state

Design Decisions:
    - One generic EntityCollection per kind, wired with per-kind hooks by
      EntityStore: the five CRUD surfaces stay identical by construction
    - dict keyed by id: insertion order preserved, O(1) lookup
    - update() swaps in a dataclasses.replace() copy: shallow merge, container
      fields replaced wholesale, and a failed merge leaves the old entity intact
    - Incoming lists are copied before validation: the list that passed the
      referential check is the list that gets stored
    - Explicit instance (no module singleton): the app factory owns one,
      tests build a fresh one each
    - Single-threaded by contract: no locks. Concurrent writers would need a
      single-writer discipline around every collection
"""

import dataclasses
from collections.abc import Callable
from datetime import datetime
from typing import Any, Generic, TypeVar

from pizzeria.core.domain_types import EntityKind, utc_now
from pizzeria.core.entities import (
    IMMUTABLE_FIELDS, Customer, Delivery, Ingredient, Order, Pizza,
)
from pizzeria.core.errors import (
    DependencyInUseError, IdGenerationError, InvalidFieldError,
    ReferentialIntegrityError,
)
from pizzeria.core.id_generators import CounterIdGenerator, IdGenerator

E = TypeVar("E")

MAX_ID_ATTEMPTS = 1000


def _detach(fields: dict[str, Any]) -> dict[str, Any]:
    """Copy list values so callers keep no handle on stored containers."""
    return {k: list(v) if isinstance(v, list) else v for k, v in fields.items()}


class EntityCollection(Generic[E]):
    """CRUD over one kind of entity. Built and wired by EntityStore."""

    def __init__(
        self,
        kind: EntityKind,
        entity_type: type[E],
        id_generator: IdGenerator,
        check_references: Callable[[dict[str, Any]], None] | None = None,
        check_dependents: Callable[[str], None] | None = None,
        assigned_fields: Callable[[], dict[str, Any]] | None = None,
    ):
        self.kind = kind
        self._entity_type = entity_type
        self._id_generator = id_generator
        self._check_references = check_references
        self._check_dependents = check_dependents
        self._assigned_fields = assigned_fields
        self._field_names = {f.name for f in dataclasses.fields(entity_type)}
        self._items: dict[str, E] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def list_all(self) -> list[E]:
        """All entities in insertion order."""
        return list(self._items.values())

    def get_by_id(self, entity_id: str) -> E | None:
        return self._items.get(entity_id)

    def create(self, **fields: Any) -> E:
        """Assign a fresh id, run referential checks, append, return the entity."""
        self._reject_fields(fields)
        fields = _detach(fields)
        if self._check_references:
            self._check_references(fields)
        if self._assigned_fields:
            fields.update(self._assigned_fields())
        entity = self._entity_type(id=self._fresh_id(), **fields)
        self._items[entity.id] = entity
        return entity

    def insert(self, entity: E) -> E:
        """Store an entity with a caller-chosen id. Used for seeding only."""
        if entity.id in self._items:
            raise ValueError(f"{self.kind.value} id {entity.id!r} already taken")
        self._items[entity.id] = entity
        return entity

    def update(self, entity_id: str, **fields: Any) -> E | None:
        """Shallow-merge fields over the stored entity. None if the id is unknown."""
        current = self._items.get(entity_id)
        if current is None:
            return None
        self._reject_fields(fields)
        updated = dataclasses.replace(current, **_detach(fields))
        self._items[entity_id] = updated
        return updated

    def delete(self, entity_id: str) -> bool:
        """Remove the entity unless a dependent still references it. False if unknown."""
        if entity_id not in self._items:
            return False
        if self._check_dependents:
            self._check_dependents(entity_id)
        del self._items[entity_id]
        return True

    def _reject_fields(self, fields: dict[str, Any]) -> None:
        for name in fields:
            if name in IMMUTABLE_FIELDS:
                raise InvalidFieldError(self.kind, name, "assigned by the store")
            if name not in self._field_names:
                raise InvalidFieldError(self.kind, name, "unknown field")

    def _fresh_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_generator.next_id()
            if candidate not in self._items:
                return candidate
        raise IdGenerationError(self.kind, MAX_ID_ATTEMPTS)


class EntityStore:
    """The five collections plus the cross-collection rules that bind them."""

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.id_generator = id_generator or CounterIdGenerator()
        self.clock = clock

        self.pizzas: EntityCollection[Pizza] = EntityCollection(
            EntityKind.PIZZA, Pizza, self.id_generator,
            check_dependents=self._guard_pizza_delete,
        )
        self.ingredients: EntityCollection[Ingredient] = EntityCollection(
            EntityKind.INGREDIENT, Ingredient, self.id_generator,
        )
        self.customers: EntityCollection[Customer] = EntityCollection(
            EntityKind.CUSTOMER, Customer, self.id_generator,
            check_dependents=self._guard_customer_delete,
        )
        self.orders: EntityCollection[Order] = EntityCollection(
            EntityKind.ORDER, Order, self.id_generator,
            check_references=self._check_order_references,
            check_dependents=self._guard_order_delete,
            assigned_fields=lambda: {"created_at": self.clock()},
        )
        self.deliveries: EntityCollection[Delivery] = EntityCollection(
            EntityKind.DELIVERY, Delivery, self.id_generator,
            check_references=self._check_delivery_references,
        )

    def collection(self, kind: EntityKind) -> EntityCollection:
        """Look up a collection by kind."""
        return {
            EntityKind.PIZZA: self.pizzas,
            EntityKind.INGREDIENT: self.ingredients,
            EntityKind.CUSTOMER: self.customers,
            EntityKind.ORDER: self.orders,
            EntityKind.DELIVERY: self.deliveries,
        }[kind]

    # ─── Cross-collection queries ────────────────────────────────

    def orders_referencing_pizza(self, pizza_id: str) -> list[Order]:
        return [o for o in self.orders.list_all() if pizza_id in o.pizzas]

    def orders_for_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self.orders.list_all() if o.customer_id == customer_id]

    def deliveries_for_order(self, order_id: str) -> list[Delivery]:
        return [d for d in self.deliveries.list_all() if d.order_id == order_id]

    def pizzas_using_ingredient(self, name: str) -> list[Pizza]:
        return [p for p in self.pizzas.list_all() if name in p.ingredients]

    # ─── Referential preconditions (create only) ─────────────────

    def _check_order_references(self, fields: dict[str, Any]) -> None:
        customer_id = fields.get("customer_id")
        if customer_id not in self.customers:
            raise ReferentialIntegrityError(
                "Customer not found", EntityKind.CUSTOMER, str(customer_id),
            )
        for pizza_id in fields.get("pizzas", []):
            if pizza_id not in self.pizzas:
                raise ReferentialIntegrityError(
                    f"Pizza with id {pizza_id} not found",
                    EntityKind.PIZZA, str(pizza_id),
                )

    def _check_delivery_references(self, fields: dict[str, Any]) -> None:
        order_id = fields.get("order_id")
        if order_id not in self.orders:
            raise ReferentialIntegrityError(
                "Order not found", EntityKind.ORDER, str(order_id),
            )

    # ─── Dependency guards (delete) ──────────────────────────────

    def _guard_pizza_delete(self, pizza_id: str) -> None:
        orders = self.orders_referencing_pizza(pizza_id)
        if orders:
            raise DependencyInUseError(
                "Cannot delete pizza that is used in orders",
                EntityKind.PIZZA, pizza_id, [o.id for o in orders],
            )

    def _guard_customer_delete(self, customer_id: str) -> None:
        orders = self.orders_for_customer(customer_id)
        if orders:
            raise DependencyInUseError(
                "Cannot delete customer with existing orders",
                EntityKind.CUSTOMER, customer_id, [o.id for o in orders],
            )

    def _guard_order_delete(self, order_id: str) -> None:
        deliveries = self.deliveries_for_order(order_id)
        if deliveries:
            raise DependencyInUseError(
                "Cannot delete order with existing delivery",
                EntityKind.ORDER, order_id, [d.id for d in deliveries],
            )
