import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before anything imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _domain():
    """Initialize the bakeandtaste domain once per session."""
    from bakeandtaste.domain import bakeandtaste

    bakeandtaste.init()
    return bakeandtaste


@pytest.fixture(scope="session", autouse=True)
def setup_db(_domain):
    from bakeandtaste.utils.db import drop_db, setup_db

    setup_db(_domain)

    yield

    drop_db(_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# --- Builders shared by application and integration tests ---


@pytest.fixture()
def make_profile():
    from bakeandtaste.identity.provisioning import ProvisionProfile
    from protean.utils.globals import current_domain

    def _make(principal_id, role="customer", email=None, display_name=None):
        command = ProvisionProfile(
            principal_id=principal_id,
            email=email or f"{principal_id}@example.com",
            display_name=display_name,
            role=role,
        )
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture()
def seller_id(make_profile):
    return make_profile("seller-a", role="seller", display_name="Ana Baker")


@pytest.fixture()
def other_seller_id(make_profile):
    return make_profile("seller-b", role="seller", display_name="Ben Oven")


@pytest.fixture()
def customer_id(make_profile):
    return make_profile("customer-1", role="customer", display_name="Maya Patel")


@pytest.fixture()
def make_bakery():
    from bakeandtaste.catalogue.storefront import UpsertBakery
    from protean.utils.globals import current_domain

    def _make(seller, name="Sweet Treats", **fields):
        command = UpsertBakery(seller_id=seller, name=name, address=fields.pop("address", "4 Mill Lane"), **fields)
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture()
def bakery_id(make_bakery, seller_id):
    return make_bakery(seller_id)


@pytest.fixture()
def make_cake():
    from bakeandtaste.catalogue.menu import AddCake
    from protean.utils.globals import current_domain

    def _make(seller, bakery, name="Chocolate Cake", price="25.00", **fields):
        command = AddCake(seller_id=seller, bakery_id=bakery, name=name, price=price, **fields)
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture()
def cake_id(make_cake, seller_id, bakery_id):
    return make_cake(seller_id, bakery_id)


@pytest.fixture()
def place_order():
    from bakeandtaste.ordering.placement import PlaceOrder
    from protean.utils.globals import current_domain

    def _place(customer, cake, quantity=2, delivery_type="pickup", **fields):
        command = PlaceOrder(
            customer_id=customer,
            cake_id=cake,
            quantity=quantity,
            delivery_type=delivery_type,
            **fields,
        )
        return current_domain.process(command, asynchronous=False)

    return _place


@pytest.fixture()
def update_status():
    from bakeandtaste.ordering.status import UpdateOrderStatus
    from protean.utils.globals import current_domain

    def _update(order, seller, status):
        command = UpdateOrderStatus(order_id=order, seller_id=seller, status=status)
        return current_domain.process(command, asynchronous=False)

    return _update
