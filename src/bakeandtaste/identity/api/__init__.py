"""Identity API package."""

from bakeandtaste.identity.api.routes import router

__all__ = ["router"]
