"""Integration tests for the catalog and order endpoints via TestClient."""

import pytest
from commerce.api.routes import order_router, product_router
from commerce.product.product import Product
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers
from shared.gateway import register_error_handlers

ADMIN = {"X-Actor-Id": "admin-1", "X-Actor-Role": "ADMIN", "X-Actor-Email": "admin@example.com"}
ALICE = {"X-Actor-Id": "alice", "X-Actor-Role": "CUSTOMER", "X-Actor-Email": "alice@example.com"}
BOB = {"X-Actor-Id": "bob", "X-Actor-Role": "CUSTOMER", "X-Actor-Email": "bob@example.com"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    register_error_handlers(app)
    return TestClient(app)


def _add_product(client, **overrides):
    body = {"name": "Lamp", "price": 10.0, "stock_quantity": 5, "category": "Lighting"}
    body.update(overrides)
    response = client.post("/products", json=body, headers=ADMIN)
    assert response.status_code == 201
    return response.json()["id"]


def _place(client, items, headers=ALICE):
    return client.post("/orders", json={"items": items}, headers=headers)


class TestProductEndpoints:
    def test_add_product_returns_201(self, client):
        response = client.post(
            "/products",
            json={"name": "Lamp", "price": 10.0, "stock_quantity": 5},
            headers=ADMIN,
        )
        assert response.status_code == 201
        assert response.json()["name"] == "Lamp"
        assert response.json()["stock_quantity"] == 5

    def test_catalog_is_public(self, client):
        _add_product(client)
        response = client.get("/products")
        assert response.status_code == 200
        assert response.json()["total"] == 1

    def test_search(self, client):
        _add_product(client, name="Desk Lamp")
        _add_product(client, name="Chair", category="Furniture")
        response = client.get("/products", params={"search": "chair"})
        assert [p["name"] for p in response.json()["items"]] == ["Chair"]

    def test_get_product(self, client):
        product_id = _add_product(client)
        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        assert response.json()["id"] == product_id

    def test_get_unknown_product_returns_404(self, client):
        assert client.get("/products/missing").status_code == 404

    def test_add_product_requires_identity(self, client):
        response = client.post("/products", json={"name": "Lamp", "price": 1.0, "stock_quantity": 1})
        assert response.status_code == 401

    def test_unknown_role_returns_401(self, client):
        headers = {"X-Actor-Id": "x", "X-Actor-Role": "PILOT"}
        response = client.post("/products", json={"name": "Lamp", "price": 1.0}, headers=headers)
        assert response.status_code == 401

    def test_customers_cannot_add_products(self, client):
        response = client.post("/products", json={"name": "Lamp", "price": 1.0}, headers=ALICE)
        assert response.status_code == 403

    def test_update_product(self, client):
        product_id = _add_product(client)
        response = client.put(
            f"/products/{product_id}",
            json={"name": "Floor Lamp", "price": 30.0, "stock_quantity": 2},
            headers=ADMIN,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Floor Lamp"
        assert response.json()["stock_quantity"] == 2

    def test_delete_product(self, client):
        product_id = _add_product(client)
        assert client.delete(f"/products/{product_id}", headers=ADMIN).status_code == 200
        assert client.get(f"/products/{product_id}").status_code == 404

    def test_invalid_price_returns_400(self, client):
        response = client.post("/products", json={"name": "Lamp", "price": -5.0}, headers=ADMIN)
        assert response.status_code == 400


class TestPlaceOrderEndpoint:
    def test_place_order_returns_201(self, client):
        lamp = _add_product(client, name="Lamp", price=10.0)
        bulb = _add_product(client, name="Bulb", price=5.0)

        response = _place(client, [{"product_id": lamp, "quantity": 2}, {"product_id": bulb, "quantity": 1}])

        assert response.status_code == 201
        body = response.json()
        assert body["total_cost"] == 25.0
        assert body["status"] == "Placed"
        assert body["payment_status"] == "Paid"
        assert body["user_id"] == "alice"
        assert body["user_email"] == "alice@example.com"
        assert len(body["items"]) == 2

    def test_stock_is_reduced(self, client):
        lamp = _add_product(client, stock_quantity=5)
        _place(client, [{"product_id": lamp, "quantity": 2}])
        assert client.get(f"/products/{lamp}").json()["stock_quantity"] == 3

    def test_insufficient_stock_returns_409(self, client):
        lamp = _add_product(client, stock_quantity=1)
        response = _place(client, [{"product_id": lamp, "quantity": 2}])
        assert response.status_code == 409
        assert current_domain.repository_for(Product).get(lamp).stock_quantity == 1

    def test_empty_order_returns_400(self, client):
        assert _place(client, []).status_code == 400

    def test_zero_quantity_returns_400(self, client):
        lamp = _add_product(client)
        assert _place(client, [{"product_id": lamp, "quantity": 0}]).status_code == 400

    def test_unknown_product_returns_404(self, client):
        assert _place(client, [{"product_id": "missing", "quantity": 1}]).status_code == 404

    def test_requires_identity(self, client):
        response = client.post("/orders", json={"items": []})
        assert response.status_code == 401


class TestOrderQueries:
    def _seed(self, client):
        lamp = _add_product(client, stock_quantity=50)
        alice_order = _place(client, [{"product_id": lamp, "quantity": 1}], headers=ALICE).json()["id"]
        bob_order = _place(client, [{"product_id": lamp, "quantity": 1}], headers=BOB).json()["id"]
        return alice_order, bob_order

    def test_customer_lists_own_orders(self, client):
        alice_order, _ = self._seed(client)
        response = client.get("/orders", headers=ALICE)
        assert response.status_code == 200
        assert [o["id"] for o in response.json()["items"]] == [alice_order]

    def test_customer_email_filter_is_ignored(self, client):
        alice_order, _ = self._seed(client)
        response = client.get("/orders", params={"email": "bob@example.com"}, headers=ALICE)
        assert [o["id"] for o in response.json()["items"]] == [alice_order]

    def test_admin_lists_all_orders(self, client):
        self._seed(client)
        assert client.get("/orders", headers=ADMIN).json()["total"] == 2

    def test_admin_filters_by_email(self, client):
        _, bob_order = self._seed(client)
        response = client.get("/orders", params={"email": "bob@example.com"}, headers=ADMIN)
        assert [o["id"] for o in response.json()["items"]] == [bob_order]

    def test_admin_filters_by_status(self, client):
        alice_order, _ = self._seed(client)
        client.patch(f"/orders/{alice_order}/status", json={"status": "Shipped"}, headers=ADMIN)
        response = client.get("/orders", params={"status": "Shipped"}, headers=ADMIN)
        assert [o["id"] for o in response.json()["items"]] == [alice_order]

    def test_unknown_status_filter_returns_400(self, client):
        assert client.get("/orders", params={"status": "Lost"}, headers=ADMIN).status_code == 400

    def test_owner_can_view_order(self, client):
        alice_order, _ = self._seed(client)
        response = client.get(f"/orders/{alice_order}", headers=ALICE)
        assert response.status_code == 200
        assert response.json()["id"] == alice_order

    def test_other_customer_cannot_view_order(self, client):
        alice_order, _ = self._seed(client)
        assert client.get(f"/orders/{alice_order}", headers=BOB).status_code == 403

    def test_admin_can_view_any_order(self, client):
        _, bob_order = self._seed(client)
        assert client.get(f"/orders/{bob_order}", headers=ADMIN).status_code == 200

    def test_unknown_order_returns_404(self, client):
        assert client.get("/orders/missing", headers=ADMIN).status_code == 404


class TestOrderStatusEndpoint:
    def _order(self, client):
        lamp = _add_product(client)
        return _place(client, [{"product_id": lamp, "quantity": 1}]).json()["id"]

    def test_admin_updates_status(self, client):
        order_id = self._order(client)
        response = client.patch(f"/orders/{order_id}/status", json={"status": "Delivered"}, headers=ADMIN)
        assert response.status_code == 200
        assert response.json()["status"] == "Delivered"

    def test_customer_cannot_update_status(self, client):
        order_id = self._order(client)
        response = client.patch(f"/orders/{order_id}/status", json={"status": "Cancelled"}, headers=ALICE)
        assert response.status_code == 403

    def test_unknown_status_returns_400(self, client):
        order_id = self._order(client)
        response = client.patch(f"/orders/{order_id}/status", json={"status": "Lost"}, headers=ADMIN)
        assert response.status_code == 400

    def test_unknown_order_returns_404(self, client):
        response = client.patch("/orders/missing/status", json={"status": "Shipped"}, headers=ADMIN)
        assert response.status_code == 404
