"""FastAPI endpoints for browsing cakes and managing a seller's bakery."""

from fastapi import APIRouter, Depends, Query

from bakeandtaste.catalogue.api.schemas import (
    AddCakeRequest,
    BakeryResponse,
    CakeIdResponse,
    CakeListingResponse,
    CakeResponse,
    SetAvailabilityRequest,
    StatusResponse,
    UpdateCakeRequest,
    UpsertBakeryRequest,
)
from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.catalogue.menu import AddCake, RemoveCake, SetCakeAvailability, UpdateCake
from bakeandtaste.catalogue.store import (
    cake_view,
    get_available_cake,
    get_own_bakery,
    list_available_cakes,
    list_own_cakes,
    owned_cake,
)
from bakeandtaste.catalogue.storefront import UpsertBakery
from bakeandtaste.identity.profile import Profile
from bakeandtaste.shared.auth import current_profile
from bakeandtaste.shared.errors import not_found
from bakeandtaste.shared.http import dispatch

cake_router = APIRouter(prefix="/cakes", tags=["cakes"])
seller_router = APIRouter(prefix="/seller", tags=["seller"])


def _bakery_response(bakery: Bakery) -> BakeryResponse:
    return BakeryResponse(
        id=str(bakery.id),
        seller_id=str(bakery.seller_id),
        name=bakery.name,
        description=bakery.description,
        address=bakery.address,
        phone=bakery.phone,
        image_url=bakery.image_url,
        created_at=bakery.created_at,
        updated_at=bakery.updated_at,
    )


def _allergens(value):
    if isinstance(value, list):
        return ",".join(value)
    return value


def _price(value):
    return None if value is None else str(value)


def _require_own_bakery(profile: Profile) -> Bakery:
    bakery = get_own_bakery(profile.id)
    if bakery is None:
        raise not_found("Bakery for seller", profile.id)
    return bakery


# --- Public browsing ---


@cake_router.get("", response_model=list[CakeListingResponse])
async def browse_cakes(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
) -> list[CakeListingResponse]:
    return [CakeListingResponse(**row) for row in list_available_cakes(limit=limit, offset=offset)]


@cake_router.get("/{cake_id}", response_model=CakeResponse)
async def cake_detail(cake_id: str) -> CakeResponse:
    return CakeResponse(**cake_view(get_available_cake(cake_id)))


# --- Seller: bakery ---


@seller_router.get("/bakery", response_model=BakeryResponse | None)
async def my_bakery(profile: Profile = Depends(current_profile)) -> BakeryResponse | None:
    bakery = get_own_bakery(profile.id)
    return _bakery_response(bakery) if bakery else None


@seller_router.put("/bakery", response_model=BakeryResponse)
async def save_bakery(body: UpsertBakeryRequest, profile: Profile = Depends(current_profile)) -> BakeryResponse:
    command = UpsertBakery(
        seller_id=profile.id,
        bakery_id=body.bakery_id,
        name=body.name,
        description=body.description,
        address=body.address,
        phone=body.phone,
        image_url=body.image_url,
    )
    dispatch(command)
    return _bakery_response(get_own_bakery(profile.id))


# --- Seller: menu ---


@seller_router.get("/cakes", response_model=list[CakeResponse])
async def my_cakes(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    profile: Profile = Depends(current_profile),
) -> list[CakeResponse]:
    bakery = _require_own_bakery(profile)
    cakes = list_own_cakes(profile.id, bakery.id, limit=limit, offset=offset)
    return [CakeResponse(**cake_view(cake)) for cake in cakes]


@seller_router.post("/cakes", status_code=201, response_model=CakeIdResponse)
async def add_cake(body: AddCakeRequest, profile: Profile = Depends(current_profile)) -> CakeIdResponse:
    bakery = _require_own_bakery(profile)
    command = AddCake(
        seller_id=profile.id,
        bakery_id=bakery.id,
        name=body.name,
        description=body.description,
        price=_price(body.price),
        category=body.category,
        allergens=_allergens(body.allergens),
        image_url=body.image_url,
        available=body.available,
        preparation_time_hours=body.preparation_time_hours,
    )
    result = dispatch(command)
    return CakeIdResponse(cake_id=result)


@seller_router.put("/cakes/{cake_id}", response_model=CakeResponse)
async def update_cake(
    cake_id: str,
    body: UpdateCakeRequest,
    profile: Profile = Depends(current_profile),
) -> CakeResponse:
    # Optional details sent as null are cleared
    cleared = [
        field
        for field in ("description", "category", "allergens", "image_url")
        if field in body.model_fields_set and getattr(body, field) is None
    ]
    command = UpdateCake(
        seller_id=profile.id,
        cake_id=cake_id,
        name=body.name,
        description=body.description,
        price=_price(body.price),
        category=body.category,
        allergens=_allergens(body.allergens),
        image_url=body.image_url,
        preparation_time_hours=body.preparation_time_hours,
        clear=cleared,
    )
    dispatch(command)
    cake, _ = owned_cake(profile.id, cake_id)
    return CakeResponse(**cake_view(cake))


@seller_router.delete("/cakes/{cake_id}", response_model=StatusResponse)
async def remove_cake(cake_id: str, profile: Profile = Depends(current_profile)) -> StatusResponse:
    dispatch(RemoveCake(seller_id=profile.id, cake_id=cake_id))
    return StatusResponse()


@seller_router.put("/cakes/{cake_id}/availability", response_model=CakeResponse)
async def set_availability(
    cake_id: str,
    body: SetAvailabilityRequest,
    profile: Profile = Depends(current_profile),
) -> CakeResponse:
    dispatch(SetCakeAvailability(seller_id=profile.id, cake_id=cake_id, available=body.available))
    cake, _ = owned_cake(profile.id, cake_id)
    return CakeResponse(**cake_view(cake))
