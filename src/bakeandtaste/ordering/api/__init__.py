"""Ordering API package."""

from bakeandtaste.ordering.api.routes import order_router, seller_order_router

__all__ = ["order_router", "seller_order_router"]
