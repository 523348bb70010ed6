"""Pizza routes — list/get/create/update/delete and their status codes."""


async def test_list_returns_seeded_pizzas(client):
    res = await client.get("/api/pizzas")
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Маргарита", "Пеперони"]


async def test_get_one(client):
    res = await client.get("/api/pizzas/2")
    assert res.status_code == 200
    assert res.json() == {
        "id": "2", "name": "Пеперони",
        "ingredients": ["доматен сос", "моцарела", "пеперони"], "price": 15.0,
    }


async def test_get_unknown_returns_404_envelope(client):
    res = await client.get("/api/pizzas/999")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Pizza not found"


async def test_create_returns_201(client):
    res = await client.post("/api/pizzas", json={
        "name": "Quattro Formaggi", "ingredients": ["моцарела"], "price": 17,
    })
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == "3"
    assert body["price"] == 17.0
    assert (await client.get(f"/api/pizzas/{body['id']}")).json() == body


async def test_create_missing_fields_returns_400(client):
    res = await client.post("/api/pizzas", json={"name": "Nameless"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["error"]["details"]}
    assert fields == {"body.ingredients", "body.price"}


async def test_update_price_keeps_other_fields(client):
    res = await client.put("/api/pizzas/1", json={"price": 11})
    assert res.status_code == 200
    assert res.json() == {
        "id": "1", "name": "Маргарита",
        "ingredients": ["доматен сос", "моцарела", "босилек"], "price": 11.0,
    }


async def test_update_unknown_returns_404(client):
    res = await client.put("/api/pizzas/999", json={"price": 11})
    assert res.status_code == 404


async def test_update_rejects_id_in_body(client):
    res = await client.put("/api/pizzas/1", json={"id": "5"})
    assert res.status_code == 400
    assert (await client.get("/api/pizzas/1")).status_code == 200


async def test_delete_unused_returns_204(client):
    res = await client.delete("/api/pizzas/2")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get("/api/pizzas/2")).status_code == 404


async def test_delete_unknown_returns_404(client):
    res = await client.delete("/api/pizzas/999")
    assert res.status_code == 404


async def test_delete_ordered_pizza_returns_400(client, order_json):
    res = await client.delete("/api/pizzas/1")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "DEPENDENCY_IN_USE"
    assert error["message"] == "Cannot delete pizza that is used in orders"
    assert (await client.get("/api/pizzas/1")).status_code == 200
