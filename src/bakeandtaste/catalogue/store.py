"""Catalog Store read side and the ownership checks shared by its handlers.

Public browsing only ever sees available cakes. A missing cake and a cake
that is off sale look the same to the caller.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.catalogue.cake import Cake
from bakeandtaste.identity.resolver import seller_profile
from bakeandtaste.shared.errors import Unauthorized, backend_guard, not_found
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


def cake_view(cake: Cake) -> dict:
    return {
        "id": str(cake.id),
        "bakery_id": str(cake.bakery_id),
        "name": cake.name,
        "description": cake.description,
        "price": cake.price,
        "category": cake.category,
        "allergens": cake.allergen_labels(),
        "image_url": cake.image_url,
        "available": bool(cake.available),
        "preparation_time_hours": cake.preparation_time_hours,
        "created_at": cake.created_at,
        "updated_at": cake.updated_at,
    }


def _load_bakery(bakery_id) -> Bakery:
    try:
        return current_domain.repository_for(Bakery).get(bakery_id)
    except ObjectNotFoundError:
        raise not_found("Bakery", bakery_id) from None


def _load_cake(cake_id) -> Cake:
    try:
        return current_domain.repository_for(Cake).get(cake_id)
    except ObjectNotFoundError:
        raise not_found("Cake", cake_id) from None


@backend_guard()
def list_available_cakes(limit: int = 100, offset: int = 0) -> list[dict]:
    """Available cakes, newest first, each with its bakery's name and address."""
    cakes = current_domain.repository_for(Cake).available(limit=limit, offset=offset)

    bakeries = {}
    listings = []
    for cake in cakes:
        key = str(cake.bakery_id)
        if key not in bakeries:
            bakeries[key] = _load_bakery(key)
        bakery = bakeries[key]

        listing = cake_view(cake)
        listing["bakery"] = {"id": key, "name": bakery.name, "address": bakery.address}
        listings.append(listing)

    return listings


@backend_guard()
def get_available_cake(cake_id) -> Cake:
    """Fetch an orderable cake. Unknown and unavailable cakes both raise `NotFound`."""
    cake = _load_cake(cake_id)
    if not cake.available:
        raise not_found("Cake", cake_id)
    return cake


@backend_guard()
def get_own_bakery(seller_id) -> Bakery | None:
    seller_profile(seller_id)
    return current_domain.repository_for(Bakery).find_by_seller(seller_id)


@backend_guard()
def owned_bakery(seller_id, bakery_id) -> Bakery:
    """Load a bakery on behalf of a seller, refusing anyone but its owner."""
    seller_profile(seller_id)
    bakery = _load_bakery(bakery_id)
    if not bakery.is_owned_by(seller_id):
        logger.warning("ownership_rejected", seller_id=str(seller_id), bakery_id=str(bakery_id))
        raise Unauthorized({"bakery_id": ["You do not own this bakery"]})
    return bakery


@backend_guard()
def owned_cake(seller_id, cake_id) -> tuple[Cake, Bakery]:
    cake = _load_cake(cake_id)
    bakery = owned_bakery(seller_id, cake.bakery_id)
    return cake, bakery


@backend_guard()
def list_own_cakes(seller_id, bakery_id, limit: int = 100, offset: int = 0) -> list[Cake]:
    """All of a bakery's cakes, available or not. Owner only."""
    owned_bakery(seller_id, bakery_id)
    return current_domain.repository_for(Cake).for_bakery(bakery_id, limit=limit, offset=offset)
