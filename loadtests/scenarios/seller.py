"""Seller load test scenarios.

Stateful SequentialTaskSet journeys: setting up a bakery and menu, and
working incoming orders through the status chain. Steps execute in order;
each depends on the previous step succeeding.
"""

import random

from locust import SequentialTaskSet, task

from loadtests.data_generators import bakery_data, cake_data, order_data, principal_id, profile_data
from loadtests.helpers.state import OrderState, SellerState

STATUS_CHAIN = ["confirmed", "in_progress", "ready", "completed"]


def open_bakery(client, state: SellerState, cakes: int = 2) -> bool:
    """Provision a seller, open a bakery and add cakes. Returns False on the first failure."""
    state.principal_id = principal_id("seller")
    steps = [
        ("POST /profiles", "post", "/profiles", profile_data(role="seller")),
        ("PUT /seller/bakery", "put", "/seller/bakery", bakery_data()),
    ]
    for name, method, path, payload in steps:
        with getattr(client, method)(path, json=payload, headers=state.headers, catch_response=True, name=name) as resp:
            if resp.status_code not in (200, 201):
                resp.failure(f"{name} failed: {resp.status_code}")
                return False
            if path == "/seller/bakery":
                state.bakery_id = resp.json()["id"]

    for _ in range(cakes):
        with client.post(
            "/seller/cakes",
            json=cake_data(),
            headers=state.headers,
            catch_response=True,
            name="POST /seller/cakes",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Add cake failed: {resp.status_code}")
                return False
            state.cake_ids.append(resp.json()["cake_id"])
    return True


class BakerySetupJourney(SequentialTaskSet):
    """Open a bakery -> add cakes -> edit a cake -> toggle availability -> dashboard."""

    def on_start(self):
        self.state = SellerState()

    @task
    def set_up(self):
        if not open_bakery(self.client, self.state, cakes=3):
            self.interrupt()

    @task
    def reprice_cake(self):
        cake_id = random.choice(self.state.cake_ids)
        with self.client.put(
            f"/seller/cakes/{cake_id}",
            json={"price": f"{random.randint(1000, 9000) / 100:.2f}"},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /seller/cakes/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update cake failed: {resp.status_code}")

    @task
    def pause_cake(self):
        cake_id = self.state.cake_ids[-1]
        with self.client.put(
            f"/seller/cakes/{cake_id}/availability",
            json={"available": False},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /seller/cakes/{id}/availability",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Toggle availability failed: {resp.status_code}")

    @task
    def view_menu(self):
        self.client.get("/seller/cakes", headers=self.state.headers, name="GET /seller/cakes")

    @task
    def view_dashboard(self):
        self.client.get("/seller/dashboard", headers=self.state.headers, name="GET /seller/dashboard")
        self.interrupt()


class OrderFulfillmentJourney(SequentialTaskSet):
    """A seller opens shop, a customer orders, the seller walks the order to completed."""

    def on_start(self):
        self.seller = SellerState()
        self.order = OrderState()

    @task
    def set_up(self):
        if not open_bakery(self.client, self.seller, cakes=1):
            self.interrupt()

    @task
    def customer_orders(self):
        headers = {"X-Principal-Id": principal_id("customer")}
        self.client.post("/profiles", json=profile_data(), headers=headers, name="POST /profiles")
        with self.client.post(
            "/orders",
            json=order_data(self.seller.cake_ids[0]),
            headers=headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.order.order_id = resp.json()["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}")
                self.interrupt()

    @task
    def work_order(self):
        for status in STATUS_CHAIN:
            with self.client.put(
                f"/seller/orders/{self.order.order_id}/status",
                json={"status": status},
                headers=self.seller.headers,
                catch_response=True,
                name="PUT /seller/orders/{id}/status",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Move to {status} failed: {resp.status_code}")
                    self.interrupt()
                self.order.current_status = status

    @task
    def check_queue(self):
        self.client.get("/seller/orders", headers=self.seller.headers, name="GET /seller/orders")
        self.interrupt()
