"""Integration tests for the Storefront API endpoints via TestClient."""

from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from storefront.api import mount
from storefront.cart.cart_item import CartItem
from storefront.domain import storefront
from storefront.order.order import Order, OrderStatus
from storefront.user.user import User


@pytest.fixture()
def client():
    app = FastAPI()
    mount(app, storefront)
    return TestClient(app)


@pytest.fixture()
def headers(user_id):
    return {"x-user-id": user_id}


def _add_cart_item(client, headers, user_id, order_id=None, item="Book", price=20, version="1"):
    """Helper: POST /api/v{version}/cart-items and return the response body."""
    response = client.post(
        f"/api/v{version}/cart-items",
        headers=headers,
        json={
            "cart_item_id": str(uuid4()),
            "order_id": order_id or str(uuid4()),
            "user_id": user_id,
            "item": item,
            "price": price,
        },
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestAuthentication:
    def test_missing_header_is_unauthorized(self, client):
        response = client.get("/api/v1/orders")
        assert response.status_code == 401

    def test_malformed_header_is_unauthorized(self, client):
        response = client.get("/api/v1/orders", headers={"x-user-id": "not-a-uuid"})
        assert response.status_code == 401

    def test_unknown_user_is_unauthorized(self, client):
        response = client.get("/api/v1/orders", headers={"x-user-id": str(uuid4())})
        assert response.status_code == 401

    def test_user_routes_require_header(self, client, user_id):
        response = client.get(f"/users/{user_id}")
        assert response.status_code == 401


class TestVersioning:
    @pytest.mark.parametrize("version", ["1", "2"])
    def test_supported_versions_behave_alike(self, client, headers, user_id, version):
        body = _add_cart_item(client, headers, user_id, version=version)
        response = client.get(f"/api/v{version}/orders/{body['order_id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["status"] == "Pending"

    def test_unsupported_version_is_not_found(self, client, headers):
        response = client.get("/api/v3/orders", headers=headers)
        assert response.status_code == 404


class TestUserEndpoints:
    def test_get_user(self, client, headers, user_id):
        response = client.get(f"/api/v1/users/{user_id}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"user_id": user_id, "name": "Ada Lovelace"}

    def test_get_user_unprefixed(self, client, headers, user_id):
        response = client.get(f"/users/{user_id}", headers=headers)
        assert response.status_code == 200

    def test_get_unknown_user_is_not_found(self, client, headers):
        response = client.get(f"/api/v1/users/{uuid4()}", headers=headers)
        assert response.status_code == 404

    def test_get_user_with_malformed_id_is_bad_request(self, client, headers):
        response = client.get("/api/v1/users/not-a-uuid", headers=headers)
        assert response.status_code == 400

    def test_add_user(self, client, headers):
        new_user_id = str(uuid4())
        response = client.post("/api/v1/users", headers=headers, json={"user_id": new_user_id, "name": "Alan Turing"})
        assert response.status_code == 200
        assert response.json() == {"user_id": new_user_id}

        response = client.get(f"/api/v1/users/{new_user_id}", headers=headers)
        assert response.json()["name"] == "Alan Turing"

    def test_add_existing_user_is_bad_request(self, client, headers, user_id):
        response = client.post("/api/v1/users", headers=headers, json={"user_id": user_id, "name": "Ada"})
        assert response.status_code == 400

    def test_add_user_with_blank_name_is_bad_request(self, client, headers):
        new_user_id = str(uuid4())
        response = client.post("/api/v1/users", headers=headers, json={"user_id": new_user_id, "name": "   "})
        assert response.status_code == 400
        assert "name" in response.json()["error"]
        assert not current_domain.repository_for(User).exists(new_user_id)

    def test_add_user_without_name_is_bad_request(self, client, headers):
        response = client.post("/api/v1/users", headers=headers, json={"user_id": str(uuid4())})
        assert response.status_code == 400


class TestCartItemEndpoints:
    def test_add_cart_item(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)

        cart_item = current_domain.repository_for(CartItem).get(body["cart_item_id"])
        assert str(cart_item.order_id) == body["order_id"]
        order = current_domain.repository_for(Order).get(body["order_id"])
        assert order.status == OrderStatus.PENDING.value

    def test_add_cart_item_with_zero_price_is_bad_request(self, client, headers, user_id):
        response = client.post(
            "/api/v1/cart-items",
            headers=headers,
            json={
                "cart_item_id": str(uuid4()),
                "order_id": str(uuid4()),
                "user_id": user_id,
                "item": "Book",
                "price": 0,
            },
        )
        assert response.status_code == 400

    def test_add_cart_item_with_blank_item_is_bad_request(self, client, headers, user_id):
        order_id = str(uuid4())
        response = client.post(
            "/api/v1/cart-items",
            headers=headers,
            json={"cart_item_id": str(uuid4()), "order_id": order_id, "user_id": user_id, "item": "   ", "price": 5},
        )
        assert response.status_code == 400
        assert "item" in response.json()["error"]
        assert current_domain.repository_for(Order).find(order_id) is None

    def test_add_cart_item_with_malformed_id_is_bad_request(self, client, headers, user_id):
        response = client.post(
            "/api/v1/cart-items",
            headers=headers,
            json={"cart_item_id": "abc", "order_id": str(uuid4()), "user_id": user_id, "item": "Book", "price": 5},
        )
        assert response.status_code == 400
        assert "cart_item_id" in response.json()["error"]

    def test_list_cart_items(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        _add_cart_item(client, headers, user_id, order_id=body["order_id"], item="Pen", price=3)

        response = client.get("/api/v1/cart-items", headers=headers)
        assert response.status_code == 200
        assert sorted(item["item"] for item in response.json()) == ["Book", "Pen"]

    def test_list_cart_items_without_pending_order_is_bad_request(self, client, headers):
        response = client.get("/api/v1/cart-items", headers=headers)
        assert response.status_code == 400

    def test_update_cart_item(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.put(
            "/api/v1/cart-items",
            headers=headers,
            json={
                "cart_item_id": body["cart_item_id"],
                "order_id": body["order_id"],
                "user_id": user_id,
                "item": "Hardcover Book",
                "price": 35,
            },
        )
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

        cart_item = current_domain.repository_for(CartItem).get(body["cart_item_id"])
        assert cart_item.price == 35

    def test_update_unknown_cart_item_is_bad_request(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.put(
            "/api/v1/cart-items",
            headers=headers,
            json={
                "cart_item_id": str(uuid4()),
                "order_id": body["order_id"],
                "user_id": user_id,
                "item": "Book",
                "price": 5,
            },
        )
        assert response.status_code == 400

    def test_delete_cart_item(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.delete(f"/api/v1/cart-items/{body['cart_item_id']}", headers=headers)
        assert response.status_code == 200
        assert current_domain.repository_for(CartItem).find(body["cart_item_id"]) is None

    def test_delete_unknown_cart_item_is_not_found(self, client, headers):
        response = client.delete(f"/api/v1/cart-items/{uuid4()}", headers=headers)
        assert response.status_code == 404


class TestOrderEndpoints:
    def test_list_orders(self, client, headers, user_id):
        _add_cart_item(client, headers, user_id)
        response = client.get("/api/v1/orders", headers=headers)
        assert response.status_code == 200
        assert len(response.json()) == 1
        assert response.json()[0]["user_id"] == user_id

    def test_list_orders_without_any_is_not_found(self, client, headers):
        response = client.get("/api/v1/orders", headers=headers)
        assert response.status_code == 404

    def test_get_unknown_order_is_not_found(self, client, headers):
        response = client.get(f"/api/v1/orders/{uuid4()}", headers=headers)
        assert response.status_code == 404

    def test_cancel_order(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.put(
            "/api/v1/orders",
            headers=headers,
            json={"order_id": body["order_id"], "user_id": user_id, "status": "Cancelled"},
        )
        assert response.status_code == 200
        assert current_domain.repository_for(Order).get(body["order_id"]).status == "Cancelled"

    def test_cancel_processed_order_is_bad_request(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        client.post("/api/v1/checkout", headers=headers, json={"order_id": body["order_id"], "user_id": user_id})

        response = client.put(
            "/api/v1/orders",
            headers=headers,
            json={"order_id": body["order_id"], "user_id": user_id, "status": "Cancelled"},
        )
        assert response.status_code == 400

    def test_delete_order(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.delete(f"/api/v1/orders/{body['order_id']}", headers=headers)
        assert response.status_code == 200
        assert current_domain.repository_for(Order).find(body["order_id"]) is None
        assert current_domain.repository_for(CartItem).find(body["cart_item_id"]) is None

    def test_delete_unknown_order_is_not_found(self, client, headers):
        response = client.delete(f"/api/v1/orders/{uuid4()}", headers=headers)
        assert response.status_code == 404


class TestCheckoutEndpoint:
    def test_checkout(self, client, headers, user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.post("/api/v2/checkout", headers=headers, json={"order_id": body["order_id"], "user_id": user_id})
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert current_domain.repository_for(Order).get(body["order_id"]).status == "Processed"

    def test_checkout_another_users_order_is_bad_request(self, client, headers, user_id, other_user_id):
        body = _add_cart_item(client, headers, user_id)
        response = client.post(
            "/api/v1/checkout",
            headers={"x-user-id": other_user_id},
            json={"order_id": body["order_id"], "user_id": other_user_id},
        )
        assert response.status_code == 400
        assert current_domain.repository_for(Order).get(body["order_id"]).status == "Pending"
