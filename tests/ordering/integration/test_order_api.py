"""Integration tests for the order endpoints."""

import pytest
from bakeandtaste.ordering.api import order_router, seller_order_router
from bakeandtaste.ordering.order import Order
from bakeandtaste.shared.http import register_error_handlers
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.utils.globals import current_domain

SELLER = {"X-Principal-Id": "seller-a"}
OTHER_SELLER = {"X-Principal-Id": "seller-b"}
CUSTOMER = {"X-Principal-Id": "customer-1"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(order_router)
    app.include_router(seller_order_router)
    register_error_handlers(app)
    return TestClient(app)


def _place(client, cake_id, **overrides):
    body = {"cake_id": cake_id, "quantity": 2, "delivery_type": "pickup"}
    body.update(overrides)
    return client.post("/orders", json=body, headers=CUSTOMER)


class TestPlaceOrderEndpoint:
    def test_place_order(self, client, customer_id, cake_id):
        response = _place(client, cake_id)
        assert response.status_code == 201
        data = response.json()
        assert data["total_amount"] == "50.00"
        assert data["status"] == "pending"
        assert data["payment_status"] == "pending"

    def test_delivery_without_address_is_400(self, client, customer_id, cake_id):
        response = _place(client, cake_id, delivery_type="delivery", delivery_address="")
        assert response.status_code == 400
        assert response.json()["kind"] == "InvalidInput"
        assert current_domain.repository_for(Order)._dao.query.all().total == 0

    def test_huge_quantity_is_400(self, client, customer_id, cake_id):
        response = _place(client, cake_id, quantity=10**18)
        assert response.status_code == 400
        assert response.json()["kind"] == "InvalidInput"
        assert current_domain.repository_for(Order)._dao.query.all().total == 0

    def test_unavailable_cake_is_409(self, client, customer_id):
        response = _place(client, "no-such-cake")
        assert response.status_code == 409
        assert response.json()["kind"] == "CakeUnavailable"

    def test_my_orders(self, client, customer_id, cake_id):
        _place(client, cake_id)
        response = client.get("/orders", headers=CUSTOMER)
        assert response.status_code == 200
        (row,) = response.json()
        assert row["bakery"]["name"] == "Sweet Treats"


class TestSellerOrderEndpoints:
    def test_bakery_orders(self, client, seller_id, customer_id, cake_id):
        _place(client, cake_id)
        response = client.get("/seller/orders", headers=SELLER)
        assert response.status_code == 200
        assert response.json()[0]["customer"]["display_name"] == "Maya Patel"

    def test_update_status(self, client, seller_id, customer_id, cake_id):
        order_id = _place(client, cake_id).json()["id"]
        response = client.put(f"/seller/orders/{order_id}/status", json={"status": "confirmed"}, headers=SELLER)
        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"
        assert response.json()["total_amount"] == "50.00"

    def test_skip_is_409(self, client, seller_id, customer_id, cake_id):
        order_id = _place(client, cake_id).json()["id"]
        response = client.put(f"/seller/orders/{order_id}/status", json={"status": "ready"}, headers=SELLER)
        assert response.status_code == 409
        assert response.json()["kind"] == "InvalidTransition"

    def test_other_seller_is_403(self, client, seller_id, other_seller_id, customer_id, cake_id):
        order_id = _place(client, cake_id).json()["id"]
        response = client.put(
            f"/seller/orders/{order_id}/status",
            json={"status": "confirmed"},
            headers=OTHER_SELLER,
        )
        assert response.status_code == 403
        assert current_domain.repository_for(Order).get(order_id).status == "pending"

    def test_dashboard(self, client, seller_id, customer_id, cake_id):
        _place(client, cake_id)
        response = client.get("/seller/dashboard", headers=SELLER)
        assert response.status_code == 200
        assert response.json()["total_revenue"] == "50.00"
        assert response.json()["total_cakes"] == 1

    def test_dashboard_without_bakery_is_404(self, client, seller_id):
        response = client.get("/seller/dashboard", headers=SELLER)
        assert response.status_code == 404
