"""Order Service read side: order lists and the seller dashboard.

Rows are plain dicts, denormalised with the cake, bakery or customer
details a page needs to render them.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.catalogue.cake import Cake
from bakeandtaste.catalogue.store import get_own_bakery, owned_bakery
from bakeandtaste.identity.profile import Profile
from bakeandtaste.identity.resolver import customer_profile
from bakeandtaste.ordering.dashboard import BakeryOrderStats
from bakeandtaste.ordering.order import Order
from bakeandtaste.shared.errors import backend_guard, not_found


def order_view(order: Order) -> dict:
    return {
        "id": str(order.id),
        "customer_id": str(order.customer_id),
        "cake_id": str(order.cake_id),
        "bakery_id": str(order.bakery_id),
        "quantity": order.quantity,
        "total_amount": order.total_amount,
        "delivery_type": order.delivery_type,
        "delivery_address": order.delivery_address,
        "preferred_time": order.preferred_time,
        "special_instructions": order.special_instructions,
        "status": order.status,
        "payment_status": order.payment_status,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


class _Lookup:
    """Loads each referenced record once per listing."""

    def __init__(self, aggregate_cls, label):
        self._repo = current_domain.repository_for(aggregate_cls)
        self._label = label
        self._seen = {}

    def __call__(self, identifier):
        key = str(identifier)
        if key not in self._seen:
            try:
                self._seen[key] = self._repo.get(key)
            except ObjectNotFoundError:
                raise not_found(self._label, key) from None
        return self._seen[key]


@backend_guard()
def get_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise not_found("Order", order_id) from None


@backend_guard()
def orders_for_customer(customer_id, limit: int = 100, offset: int = 0) -> list[dict]:
    """The customer's orders, newest first, with cake and bakery details."""
    customer_profile(customer_id)

    orders = current_domain.repository_for(Order).for_customer(customer_id, limit=limit, offset=offset)
    cakes = _Lookup(Cake, "Cake")
    bakeries = _Lookup(Bakery, "Bakery")

    rows = []
    for order in orders:
        cake = cakes(order.cake_id)
        bakery = bakeries(order.bakery_id)
        row = order_view(order)
        row["cake"] = {"name": cake.name, "price": cake.price}
        row["bakery"] = {"name": bakery.name, "address": bakery.address}
        rows.append(row)
    return rows


@backend_guard()
def orders_for_bakery(seller_id, bakery_id, limit: int = 100, offset: int = 0) -> list[dict]:
    """A bakery's incoming orders, newest first. Owner only."""
    owned_bakery(seller_id, bakery_id)

    orders = current_domain.repository_for(Order).for_bakery(bakery_id, limit=limit, offset=offset)
    cakes = _Lookup(Cake, "Cake")
    customers = _Lookup(Profile, "Profile")

    rows = []
    for order in orders:
        cake = cakes(order.cake_id)
        customer = customers(order.customer_id)
        row = order_view(order)
        row["cake"] = {"name": cake.name, "price": cake.price}
        row["customer"] = {
            "display_name": customer.display_name,
            "email": customer.email,
            "phone": customer.phone,
        }
        rows.append(row)
    return rows


@backend_guard()
def seller_dashboard(seller_id) -> dict | None:
    """Headline figures for the seller's bakery, or None before it exists."""
    bakery = get_own_bakery(seller_id)
    if bakery is None:
        return None

    try:
        stats = current_domain.repository_for(BakeryOrderStats).get(str(bakery.id))
    except ObjectNotFoundError:
        stats = None

    return {
        "bakery_id": str(bakery.id),
        "total_cakes": current_domain.repository_for(Cake).count_for_bakery(bakery.id),
        "total_orders": stats.total_orders if stats else 0,
        "pending_orders": stats.pending_orders if stats else 0,
        "total_revenue": stats.total_revenue if stats else "0.00",
    }
