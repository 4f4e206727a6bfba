# tests/test_orders.py

import json
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession


def test_create_order_applies_defaults(client, order_payload):
    response = client.post("/orders", json=order_payload)
    assert response.status_code == 201
    body = response.json()

    assert isinstance(body["id"], int)
    assert body["status"] == "Pending"
    assert datetime.fromisoformat(body["orderDate"])
    assert body["customerName"] == "Asha Rao"
    assert body["upiScreenshot"] == order_payload["upiScreenshot"]
    assert body["products"] == order_payload["products"]
    assert body["total"] == 24.48


def test_create_order_keeps_given_date_and_status(client, order_payload):
    payload = {**order_payload, "orderDate": "2024-05-01T10:00:00", "status": "Approved"}
    body = client.post("/orders", json=payload).json()

    assert body["orderDate"].startswith("2024-05-01T10:00:00")
    assert body["status"] == "Approved"


def test_create_order_without_screenshot(client, order_payload):
    order_payload.pop("upiScreenshot")
    order_payload["paymentMethod"] = "COD"
    response = client.post("/orders", json=order_payload)
    assert response.status_code == 201
    assert response.json()["upiScreenshot"] is None


def test_create_order_with_malformed_payload_is_bad_request(client, order_payload):
    order_payload["products"] = [{"id": "not-a-number", "name": "Mug"}]
    response = client.post("/orders", json=order_payload)
    assert response.status_code == 400
    body = response.json()
    assert set(body) == {"message", "error"}
    assert body["message"] == "Failed to create order."
    assert "products" in body["error"]
    assert client.get("/orders").json() == []


def test_list_orders(client, order_payload):
    assert client.get("/orders").json() == []

    first = client.post("/orders", json=order_payload).json()
    second = client.post("/orders", json={**order_payload, "customerName": "Ravi"}).json()

    orders = client.get("/orders").json()
    assert [o["id"] for o in orders] == [first["id"], second["id"]]


def test_update_status_is_reflected_in_list(client, order_payload):
    created = client.post("/orders", json=order_payload).json()

    response = client.post(f"/orders/{created['id']}/status", json={"status": "Approved"})
    assert response.status_code == 200
    assert response.json()["status"] == "Approved"

    listed = {o["id"]: o for o in client.get("/orders").json()}
    assert listed[created["id"]]["status"] == "Approved"


def test_update_status_accepts_any_string(client, order_payload):
    created = client.post("/orders", json=order_payload).json()
    response = client.post(f"/orders/{created['id']}/status", json={"status": "Out for delivery"})
    assert response.json()["status"] == "Out for delivery"


def test_update_status_of_missing_order_is_404(client):
    response = client.post("/orders/999/status", json={"status": "Approved"})
    assert response.status_code == 404
    assert response.json() == {"message": "Order not found."}


def test_update_status_with_malformed_id_is_bad_request(client):
    response = client.post("/orders/64f0c2a9e1/status", json={"status": "Approved"})
    assert response.status_code == 400
    assert set(response.json()) == {"message", "error"}
    assert response.json()["message"] == "Failed to update order status."


def test_update_status_requires_status(client, order_payload):
    created = client.post("/orders", json=order_payload).json()
    response = client.post(f"/orders/{created['id']}/status", json={})
    assert response.status_code == 400


@pytest.mark.parametrize("raw_total", ["NaN", "Infinity", "1e400"])
def test_create_order_with_non_finite_total_is_bad_request(client, order_payload, raw_total):
    order_payload["total"] = 0
    body = json.dumps(order_payload).replace('"total": 0', f'"total": {raw_total}')

    response = client.post("/orders", content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["message"] == "Failed to create order."

    listed = client.get("/orders")
    assert listed.status_code == 200
    assert listed.json() == []


def test_update_status_with_out_of_range_id_is_bad_request(client):
    response = client.post("/orders/99999999999999999999/status", json={"status": "Approved"})
    assert response.status_code == 400
    assert response.json()["message"] == "Failed to update order status."


async def rejecting_commit(self):
    raise IntegrityError("INSERT INTO orders", {}, Exception("NOT NULL constraint failed: orders.status"))


def test_create_order_rejected_by_store_is_rolled_back(client, order_payload, monkeypatch):
    with monkeypatch.context() as m:
        m.setattr(AsyncSession, "commit", rejecting_commit)
        response = client.post("/orders", json=order_payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Failed to create order."
    assert "NOT NULL constraint failed" in body["error"]
    assert client.get("/orders").json() == []


def test_status_update_rejected_by_store_is_rolled_back(client, order_payload, monkeypatch):
    created = client.post("/orders", json=order_payload).json()

    with monkeypatch.context() as m:
        m.setattr(AsyncSession, "commit", rejecting_commit)
        response = client.post(f"/orders/{created['id']}/status", json={"status": "Approved"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Failed to update order status."
    assert "NOT NULL constraint failed" in body["error"]

    listed = {o["id"]: o for o in client.get("/orders").json()}
    assert listed[created["id"]]["status"] == "Pending"
