"""Caller identification for HTTP routes.

Authentication happens upstream; by the time a request arrives here the
gateway has put the authenticated principal in ``X-Principal-Id``.
"""

from fastapi import Header

from bakeandtaste.identity.profile import Profile
from bakeandtaste.identity.resolver import resolve_profile
from bakeandtaste.shared.errors import Unauthorized

PRINCIPAL_HEADER = "X-Principal-Id"


def _principal(header_value: str) -> str:
    if not header_value or not header_value.strip():
        raise Unauthorized({"principal": [f"Missing {PRINCIPAL_HEADER} header"]})
    return header_value.strip()


async def current_principal(x_principal_id: str = Header(default="")) -> str:
    return _principal(x_principal_id)


async def current_profile(x_principal_id: str = Header(default="")) -> Profile:
    """Resolve the caller's profile. Unprovisioned principals get `NotFound`."""
    return resolve_profile(_principal(x_principal_id))
