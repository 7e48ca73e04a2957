"""Integration tests for the browsing and seller menu endpoints."""

import pytest
from bakeandtaste.catalogue.api import cake_router, seller_router
from bakeandtaste.catalogue.cake import Cake
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
    app.include_router(cake_router)
    app.include_router(seller_router)
    register_error_handlers(app)
    return TestClient(app)


class TestBrowseEndpoints:
    def test_browse_lists_available_cakes(self, client, cake_id):
        response = client.get("/cakes")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["bakery"]["name"] == "Sweet Treats"
        assert data[0]["price"] == "25.00"

    def test_cake_detail(self, client, cake_id):
        response = client.get(f"/cakes/{cake_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Chocolate Cake"

    def test_unknown_cake_is_404(self, client):
        response = client.get("/cakes/no-such-cake")
        assert response.status_code == 404
        assert response.json()["kind"] == "NotFound"


class TestSellerBakeryEndpoints:
    def test_no_bakery_yet(self, client, seller_id):
        response = client.get("/seller/bakery", headers=SELLER)
        assert response.status_code == 200
        assert response.json() is None

    def test_save_bakery(self, client, seller_id):
        response = client.put(
            "/seller/bakery",
            json={"name": "Sweet Treats", "address": "4 Mill Lane"},
            headers=SELLER,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Sweet Treats"
        assert response.json()["seller_id"] == seller_id

    def test_customer_cannot_save_bakery(self, client, customer_id):
        response = client.put("/seller/bakery", json={"name": "Nope"}, headers=CUSTOMER)
        assert response.status_code == 403


class TestSellerMenuEndpoints:
    def test_add_cake(self, client, bakery_id):
        response = client.post(
            "/seller/cakes",
            json={"name": "Chocolate Cake", "price": "25.00", "allergens": ["gluten", "dairy"]},
            headers=SELLER,
        )
        assert response.status_code == 201

        cake = current_domain.repository_for(Cake).get(response.json()["cake_id"])
        assert cake.allergen_labels() == ["gluten", "dairy"]

    def test_add_cake_without_bakery_is_404(self, client, seller_id):
        response = client.post("/seller/cakes", json={"name": "Cake", "price": "10"}, headers=SELLER)
        assert response.status_code == 404

    def test_invalid_price_is_400(self, client, bakery_id):
        response = client.post("/seller/cakes", json={"name": "Cake", "price": "-1"}, headers=SELLER)
        assert response.status_code == 400
        assert "price" in response.json()["error"]

    def test_my_cakes(self, client, cake_id):
        response = client.get("/seller/cakes", headers=SELLER)
        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [cake_id]

    def test_update_cake(self, client, cake_id):
        response = client.put(f"/seller/cakes/{cake_id}", json={"price": 30}, headers=SELLER)
        assert response.status_code == 200
        assert response.json()["price"] == "30.00"

    def test_null_clears_a_detail(self, client, make_cake, seller_id, bakery_id):
        cake_id = make_cake(seller_id, bakery_id, description="Dark sponge", category="Birthday")

        response = client.put(f"/seller/cakes/{cake_id}", json={"description": None}, headers=SELLER)

        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["category"] == "Birthday"

    def test_toggle_availability(self, client, cake_id):
        response = client.put(f"/seller/cakes/{cake_id}/availability", json={"available": False}, headers=SELLER)
        assert response.status_code == 200
        assert response.json()["available"] is False

        assert client.get(f"/cakes/{cake_id}").status_code == 404

    def test_other_seller_is_forbidden(self, client, cake_id, other_seller_id):
        response = client.put(
            f"/seller/cakes/{cake_id}/availability",
            json={"available": False},
            headers=OTHER_SELLER,
        )
        assert response.status_code == 403
        assert response.json()["kind"] == "Unauthorized"

    def test_remove_cake(self, client, cake_id):
        response = client.delete(f"/seller/cakes/{cake_id}", headers=SELLER)
        assert response.status_code == 200
        assert client.get("/seller/cakes", headers=SELLER).json() == []
