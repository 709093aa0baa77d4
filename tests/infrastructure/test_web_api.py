"""Tests for the Flask HTTP API using the test client."""

import pytest

from stockpos.infrastructure.bootstrap import in_memory_services
from stockpos.infrastructure.config import Settings
from stockpos.infrastructure.web.app import create_app


@pytest.fixture
def client():
    app = create_app(in_memory_services(Settings(operator="Register 1")))
    app.config["TESTING"] = True
    return app.test_client()


def _create(client, **overrides):
    body = {
        "inventoryName": "Main Store",
        "itemName": "Coffee",
        "weightPerItem": 0.5,
        "quantity": 10,
        "price": 5,
    }
    body.update(overrides)
    response = client.post("/products", json=body)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


class TestProducts:

    def test_create_and_fetch(self, client):
        created = _create(client)
        assert created["totalWeight"] == 5.0
        fetched = client.get(f"/products/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.get_json()["itemName"] == "Coffee"

    def test_create_missing_field_is_400(self, client):
        response = client.post("/products", json={"itemName": "Coffee"})
        assert response.status_code == 400
        assert response.get_json()["type"] == "ValidationError"

    def test_non_object_body_is_400(self, client):
        response = client.post("/products", json=[1, 2])
        assert response.status_code == 400

    def test_unknown_product_is_404(self, client):
        response = client.get("/products/missing")
        assert response.status_code == 404
        assert "not found" in response.get_json()["error"]

    def test_list_filters(self, client):
        _create(client, itemName="Green Tea")
        _create(client, itemName="Black Tea", quantity=0)
        names = [p["itemName"] for p in client.get("/products?search=tea&inStock=true").get_json()["products"]]
        assert names == ["Green Tea"]

    def test_patch_and_delete(self, client):
        created = _create(client)
        patched = client.patch(f"/products/{created['id']}", json={"price": 7.5})
        assert patched.get_json()["price"] == 7.5

        deleted = client.delete(f"/products/{created['id']}")
        assert deleted.get_json() == {"deleted": created["id"]}
        assert client.get(f"/products/{created['id']}").status_code == 404

    def test_adjust(self, client):
        created = _create(client)
        response = client.post(
            f"/products/{created['id']}/adjust",
            json={"direction": "increase", "amount": 5},
        )
        body = response.get_json()
        assert response.status_code == 200
        assert body["product"]["quantity"] == 15
        assert body["entry"]["previousQuantity"] == 10
        assert body["entry"]["updatedBy"] == "Register 1"

    def test_overdraw_is_409(self, client):
        created = _create(client, quantity=2)
        response = client.post(
            f"/products/{created['id']}/adjust",
            json={"direction": "decrease", "amount": 3},
        )
        assert response.status_code == 409
        assert response.get_json()["type"] == "InsufficientStockError"

    def test_history_filter(self, client):
        created = _create(client)
        client.post(f"/products/{created['id']}/adjust", json={"direction": "decrease", "amount": 1})
        history = client.get("/history?actionType=decrease").get_json()["history"]
        assert len(history) == 1
        assert history[0]["newQuantity"] == 9


class TestCartAndCheckout:

    def test_sale_of_three_from_ten(self, client):
        product = _create(client)
        for _ in range(3):
            assert client.post("/cart/items", json={"productId": product["id"]}).status_code == 201

        cart = client.get("/cart").get_json()
        assert cart["state"] == "BUILDING"
        assert cart["totals"] == {"quantity": 3, "weight": 1.5, "price": 15.0}

        response = client.post("/cart/checkout", json={"customerName": "Alice"})
        invoice = response.get_json()
        assert response.status_code == 201
        assert invoice["billNumber"] == "INV-000001"
        assert invoice["grandTotal"] == 15.0

        stocked = client.get(f"/products/{product['id']}").get_json()
        assert stocked["quantity"] == 7
        assert stocked["totalWeight"] == 3.5
        assert client.get("/cart").get_json()["state"] == "EMPTY"

        sales = client.get("/history?actionType=sale").get_json()["history"]
        assert [(e["previousQuantity"], e["newQuantity"]) for e in sales] == [(10, 7)]

    def test_empty_checkout_is_409(self, client):
        response = client.post("/cart/checkout", json={})
        assert response.status_code == 409
        assert response.get_json()["type"] == "EmptyCartError"
        assert client.get("/invoices").get_json()["invoices"] == []

    def test_add_beyond_stock_is_409(self, client):
        product = _create(client, quantity=1)
        client.post("/cart/items", json={"productId": product["id"]})
        response = client.post("/cart/items", json={"productId": product["id"]})
        assert response.status_code == 409
        assert response.get_json()["type"] == "OutOfStockError"

    def test_non_text_customer_is_400_and_sells_nothing(self, client):
        product = _create(client)
        client.post("/cart/items", json={"productId": product["id"]})

        response = client.post("/cart/checkout", json={"customerName": 42})
        assert response.status_code == 400
        assert response.get_json()["type"] == "ValidationError"

        assert client.get(f"/products/{product['id']}").get_json()["quantity"] == 10
        assert client.get("/invoices").get_json()["invoices"] == []
        assert client.get("/history?actionType=sale").get_json()["history"] == []
        assert client.get("/cart").get_json()["totals"]["quantity"] == 1

    def test_set_quantity_and_remove(self, client):
        product = _create(client)
        client.post("/cart/items", json={"productId": product["id"]})
        patched = client.patch(f"/cart/items/{product['id']}", json={"quantity": 4})
        assert patched.get_json()["items"][0]["quantity"] == 4

        missing = client.patch(f"/cart/items/{product['id']}", json={})
        assert missing.status_code == 400

        removed = client.delete(f"/cart/items/{product['id']}")
        assert removed.get_json()["items"] == []

    def test_stale_cart_keeps_lines(self, client):
        product = _create(client)
        client.post("/cart/items", json={"productId": product["id"]})
        client.patch(f"/cart/items/{product['id']}", json={"quantity": 3})
        client.post(f"/products/{product['id']}/adjust", json={"direction": "decrease", "amount": 9})

        response = client.post("/cart/checkout", json={"customerName": "Alice"})
        assert response.status_code == 409
        assert client.get("/cart").get_json()["totals"]["quantity"] == 3
        assert client.get(f"/products/{product['id']}").get_json()["quantity"] == 1


class TestInvoicesAndDashboard:

    def _sell(self, client, customer):
        product = _create(client)
        client.post("/cart/items", json={"productId": product["id"]})
        return client.post("/cart/checkout", json={"customerName": customer}).get_json()

    def test_lookup_by_id_and_bill_number(self, client):
        invoice = self._sell(client, "Alice")
        assert client.get(f"/invoices/{invoice['id']}").get_json() == invoice
        assert client.get("/invoices/INV-000001").get_json() == invoice
        assert client.get("/invoices/INV-000009").status_code == 404

    def test_search(self, client):
        self._sell(client, "Alice")
        self._sell(client, "Bob")
        found = client.get("/invoices?search=bob").get_json()["invoices"]
        assert [inv["customerName"] for inv in found] == ["Bob"]

    def test_dashboard(self, client):
        self._sell(client, "")
        summary = client.get("/dashboard").get_json()
        assert summary == {
            "totalProducts": 1,
            "totalStockWeight": 4.5,
            "totalRevenue": 5.0,
            "lowStockAlerts": 1,
            "salesToday": 1,
        }


class TestUsers:

    def test_user_crud(self, client):
        created = client.post("/users", json={"name": "Jane", "email": "jane@example.com"})
        assert created.status_code == 201
        user = created.get_json()
        assert user["role"] == "Staff"

        patched = client.patch(f"/users/{user['id']}", json={"role": "Manager"})
        assert patched.get_json()["role"] == "Manager"

        assert client.get("/users?search=jane").get_json()["users"][0]["id"] == user["id"]
        assert client.delete(f"/users/{user['id']}").get_json() == {"deleted": user["id"]}
        assert client.delete(f"/users/{user['id']}").status_code == 404

    def test_invalid_email_is_400(self, client):
        response = client.post("/users", json={"name": "Jane", "email": "nope"})
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [
        {"name": 5, "email": "a@b.c"},
        {"name": "Jane", "email": 7},
    ])
    def test_non_text_fields_are_400(self, client, body):
        response = client.post("/users", json=body)
        assert response.status_code == 400
        assert response.get_json()["type"] == "ValidationError"
        assert client.get("/users").get_json()["users"] == []
