"""API test fixtures — FastAPI app around a fresh store + async test client.

Invariants:
    - Every test gets its own app and store (seeded catalog, counter ids, frozen clock)
    - No lifespan: logging setup is not exercised by route tests

Design Decisions:
    - create_app(store=...) over dependency_overrides: the app factory is the
      production seam for choosing the store instance
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pizzeria.config import Settings
from pizzeria.main import create_app
from tests.helpers import VALID_CUSTOMER


@pytest.fixture
def app(store):
    return create_app(settings=Settings(), store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def customer_json(client):
    res = await client.post("/api/customers", json=VALID_CUSTOMER)
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def order_json(client, customer_json):
    res = await client.post("/api/orders", json={
        "pizzas": ["1"], "customerId": customer_json["id"], "totalPrice": 12.5,
    })
    assert res.status_code == 201
    return res.json()
