"""Catalogue API package."""

from bakeandtaste.catalogue.api.routes import cake_router, seller_router

__all__ = ["cake_router", "seller_router"]
