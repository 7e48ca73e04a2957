"""Customer load test scenarios: browse the catalogue and place orders."""

import random

from locust import SequentialTaskSet, task

from loadtests.data_generators import order_data, principal_id, profile_data
from loadtests.helpers.state import CustomerState


class BrowseAndOrderJourney(SequentialTaskSet):
    """Sign in -> browse cakes -> view one -> order it -> list my orders."""

    def on_start(self):
        self.state = CustomerState(principal_id=principal_id("customer"))

    @task
    def sign_in(self):
        with self.client.post(
            "/profiles",
            json=profile_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /profiles",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Provision failed: {resp.status_code}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/cakes",
            params={"limit": 20, "offset": random.choice([0, 0, 20])},
            catch_response=True,
            name="GET /cakes",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code}")
                self.interrupt()
            self.state.cake_ids = [cake["id"] for cake in resp.json()]
            if not self.state.cake_ids:
                # Nothing on sale yet; not a failure
                resp.success()
                self.interrupt()

    @task
    def view_cake(self):
        cake_id = random.choice(self.state.cake_ids)
        self.client.get(f"/cakes/{cake_id}", name="GET /cakes/{id}")

    @task
    def place_order(self):
        cake_id = random.choice(self.state.cake_ids)
        with self.client.post(
            "/orders",
            json=order_data(cake_id),
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
            elif resp.status_code == 409:
                # The seller paused the cake between browse and order
                resp.success()
            else:
                resp.failure(f"Place order failed: {resp.status_code}")

    @task
    def my_orders(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        self.interrupt()
