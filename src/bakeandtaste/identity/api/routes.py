"""FastAPI endpoints for profiles."""

from fastapi import APIRouter, Depends

from bakeandtaste.identity.api.schemas import (
    ProfileIdResponse,
    ProfileResponse,
    ProvisionProfileRequest,
    UpdateProfileRequest,
)
from bakeandtaste.identity.details import UpdateProfileDetails
from bakeandtaste.identity.profile import Profile
from bakeandtaste.identity.provisioning import ProvisionProfile
from bakeandtaste.identity.resolver import get_profile
from bakeandtaste.shared.auth import current_principal, current_profile
from bakeandtaste.shared.http import dispatch

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _profile_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        id=str(profile.id),
        principal_id=profile.principal_id,
        role=profile.role,
        display_name=profile.display_name,
        email=profile.email,
        phone=profile.phone,
        address=profile.address,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


@router.post("", status_code=201, response_model=ProfileIdResponse)
async def provision_profile(
    body: ProvisionProfileRequest,
    principal_id: str = Depends(current_principal),
) -> ProfileIdResponse:
    command = ProvisionProfile(
        principal_id=principal_id,
        email=body.email,
        display_name=body.display_name,
        role=body.role,
    )
    result = dispatch(command)
    return ProfileIdResponse(profile_id=result)


@router.get("/me", response_model=ProfileResponse)
async def my_profile(profile: Profile = Depends(current_profile)) -> ProfileResponse:
    return _profile_response(profile)


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    body: UpdateProfileRequest,
    profile: Profile = Depends(current_profile),
) -> ProfileResponse:
    command = UpdateProfileDetails(
        profile_id=profile.id,
        display_name=body.display_name,
        phone=body.phone,
        address=body.address,
    )
    dispatch(command)
    return _profile_response(get_profile(profile.id))
