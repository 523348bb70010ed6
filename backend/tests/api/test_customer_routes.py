"""Customer routes — phone validation and the orders delete guard."""

from tests.helpers import VALID_CUSTOMER


async def test_create_customer(client):
    res = await client.post("/api/customers", json=VALID_CUSTOMER)
    assert res.status_code == 201
    assert res.json() == {"id": "1", **VALID_CUSTOMER}


async def test_create_customer_with_invalid_phone_returns_400(client):
    res = await client.post("/api/customers", json={**VALID_CUSTOMER, "phone": "12ab"})
    assert res.status_code == 400
    assert "Invalid phone number" in res.json()["error"]["details"][0]["message"]
    assert (await client.get("/api/customers")).json() == []


async def test_create_customer_blank_address_returns_400(client):
    res = await client.post("/api/customers", json={**VALID_CUSTOMER, "address": "  "})
    assert res.status_code == 400
    assert res.json()["errors"] == ["address: Value error, cannot be empty or whitespace"]


async def test_delete_customer_with_orders_returns_400(client, customer_json, order_json):
    res = await client.delete(f"/api/customers/{customer_json['id']}")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Cannot delete customer with existing orders"


async def test_delete_customer_without_orders(client, customer_json):
    res = await client.delete(f"/api/customers/{customer_json['id']}")
    assert res.status_code == 204
    assert (await client.get(f"/api/customers/{customer_json['id']}")).status_code == 404


async def test_update_customer_address(client, customer_json):
    res = await client.put(
        f"/api/customers/{customer_json['id']}", json={"address": "2 Side St"},
    )
    assert res.status_code == 200
    assert res.json() == {**customer_json, "address": "2 Side St"}
