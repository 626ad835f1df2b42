"""Orders and payment intents."""

import pytest

from routes import payments


ORDER = {
    "plantId": "0123456789abcdef01234567",
    "quantity": 2,
    "price": 40,
    "customer": {"name": "Ann", "email": "someone@x.com"},
    "seller": {"email": "s@x.com"},
    "address": "1 Green St",
}


@pytest.mark.asyncio
async def test_create_order_stamps_customer(client, orders, session_for):
    r = await client.post("/order", json=ORDER, headers=session_for("a@x.com"))
    assert r.status_code == 200
    assert "insertedId" in r.json()

    stored = orders.docs[0]
    assert stored["customer"]["email"] == "a@x.com"
    assert stored["customer"]["name"] == "Ann"
    assert stored["status"] == "Pending"


@pytest.mark.asyncio
async def test_create_order_requires_session(client, orders):
    r = await client.post("/order", json=ORDER)
    assert r.status_code == 401
    assert orders.docs == []


@pytest.mark.asyncio
async def test_customer_orders_only_for_self(client, orders, session_for):
    orders.add(customer={"email": "a@x.com"}, seller={"email": "s@x.com"}, price=10)
    orders.add(customer={"email": "b@x.com"}, seller={"email": "s@x.com"}, price=20)

    r = await client.get("/orders/customer/a@x.com", headers=session_for("a@x.com"))
    assert r.status_code == 200
    assert [o["price"] for o in r.json()] == [10]

    r = await client.get("/orders/customer/b@x.com", headers=session_for("a@x.com"))
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_seller_orders(client, users, orders, session_for):
    users.add("s@x.com", role="seller")
    users.add("a@x.com")
    orders.add(customer={"email": "a@x.com"}, seller={"email": "s@x.com"}, price=10)
    orders.add(customer={"email": "a@x.com"}, seller={"email": "t@x.com"}, price=20)

    r = await client.get("/orders/seller/s@x.com", headers=session_for("s@x.com"))
    assert r.status_code == 200
    assert [o["price"] for o in r.json()] == [10]

    r = await client.get("/orders/seller/s@x.com", headers=session_for("a@x.com"))
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_payment_intent(client, plants, monkeypatch):
    fern = plants.add(name="Fern", price=12.5, quantity=3)
    calls = []

    def fake_create_payment_intent(*, amount_cents):
        calls.append(amount_cents)
        return {"id": "pi_1", "client_secret": "pi_1_secret"}

    monkeypatch.setattr(payments, "create_payment_intent", fake_create_payment_intent)

    r = await client.post("/create-payment-intent", json={"plantId": str(fern["_id"]), "quantity": 2})
    assert r.status_code == 200
    assert r.json() == {"clientSecret": "pi_1_secret"}
    assert calls == [2500]


@pytest.mark.asyncio
async def test_payment_intent_unknown_plant(client):
    r = await client.post(
        "/create-payment-intent",
        json={"plantId": "0123456789abcdef01234567", "quantity": 1},
    )
    assert r.status_code == 404
    assert r.json() == {"detail": "Plant not found"}
