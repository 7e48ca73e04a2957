"""FastAPI endpoints for placing orders and working a bakery's order queue."""

from fastapi import APIRouter, Depends, Query

from bakeandtaste.catalogue.store import get_own_bakery
from bakeandtaste.identity.profile import Profile
from bakeandtaste.ordering.api.schemas import (
    BakeryOrderResponse,
    CustomerOrderResponse,
    DashboardResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateOrderStatusRequest,
)
from bakeandtaste.ordering.placement import PlaceOrder
from bakeandtaste.ordering.queries import (
    get_order,
    order_view,
    orders_for_bakery,
    orders_for_customer,
    seller_dashboard,
)
from bakeandtaste.ordering.status import UpdateOrderStatus
from bakeandtaste.shared.auth import current_profile
from bakeandtaste.shared.errors import not_found
from bakeandtaste.shared.http import dispatch

order_router = APIRouter(prefix="/orders", tags=["orders"])
seller_order_router = APIRouter(prefix="/seller", tags=["seller"])


# --- Customer ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, profile: Profile = Depends(current_profile)) -> OrderResponse:
    command = PlaceOrder(
        customer_id=profile.id,
        cake_id=body.cake_id,
        quantity=body.quantity,
        delivery_type=body.delivery_type,
        delivery_address=body.delivery_address,
        preferred_time=body.preferred_time,
        special_instructions=body.special_instructions,
    )
    order_id = dispatch(command)
    return OrderResponse(**order_view(get_order(order_id)))


@order_router.get("", response_model=list[CustomerOrderResponse])
async def my_orders(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    profile: Profile = Depends(current_profile),
) -> list[CustomerOrderResponse]:
    rows = orders_for_customer(profile.id, limit=limit, offset=offset)
    return [CustomerOrderResponse(**row) for row in rows]


# --- Seller ---


@seller_order_router.get("/orders", response_model=list[BakeryOrderResponse])
async def bakery_orders(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    profile: Profile = Depends(current_profile),
) -> list[BakeryOrderResponse]:
    bakery = get_own_bakery(profile.id)
    if bakery is None:
        raise not_found("Bakery for seller", profile.id)
    rows = orders_for_bakery(profile.id, bakery.id, limit=limit, offset=offset)
    return [BakeryOrderResponse(**row) for row in rows]


@seller_order_router.put("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    profile: Profile = Depends(current_profile),
) -> OrderResponse:
    dispatch(UpdateOrderStatus(order_id=order_id, seller_id=profile.id, status=body.status))
    return OrderResponse(**order_view(get_order(order_id)))


@seller_order_router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(profile: Profile = Depends(current_profile)) -> DashboardResponse:
    figures = seller_dashboard(profile.id)
    if figures is None:
        raise not_found("Bakery for seller", profile.id)
    return DashboardResponse(**figures)
