"""Root conftest — shared store fixtures.

Invariants:
    - Every test gets a fresh EntityStore (no state shared between tests)
    - Ids are deterministic (CounterIdGenerator) and time is frozen (fixed_clock)
"""

import pytest

from pizzeria.core.entity_store import EntityStore
from pizzeria.core.id_generators import CounterIdGenerator
from pizzeria.core.seed_catalog import seed_catalog
from tests.helpers import FIXED_NOW


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def empty_store(fixed_clock):
    """Store with no seed data."""
    return EntityStore(id_generator=CounterIdGenerator(), clock=fixed_clock)


@pytest.fixture
def store(empty_store):
    """Store seeded with the starter catalog (pizzas "1", "2"; ingredients "1"-"4")."""
    return seed_catalog(empty_store)


@pytest.fixture
def customer(store):
    return store.customers.create(name="Ana", address="1 Main St", phone="0888123456")


@pytest.fixture
def order(store, customer):
    return store.orders.create(
        pizzas=["1"], customer_id=customer.id, total_price=12.5, status="pending",
    )
