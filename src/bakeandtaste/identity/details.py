"""Profile contact details: command and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.profile import Profile
from bakeandtaste.identity.resolver import get_profile
from bakeandtaste.shared.errors import InvalidInput


@bakeandtaste.command(part_of="Profile")
class UpdateProfileDetails:
    profile_id: Identifier(required=True)
    display_name: String(max_length=255)
    phone: String(max_length=20)
    address: Text()


@bakeandtaste.command_handler(part_of=Profile)
class UpdateProfileDetailsHandler:
    @handle(UpdateProfileDetails)
    def update_profile_details(self, command):
        profile = get_profile(command.profile_id)

        changes = {}
        if command.display_name is not None:
            if not command.display_name.strip():
                raise InvalidInput({"display_name": ["Display name cannot be blank"]})
            changes["display_name"] = command.display_name.strip()
        if command.phone is not None:
            changes["phone"] = command.phone
        if command.address is not None:
            changes["address"] = command.address

        profile.update_details(**changes)
        current_domain.repository_for(Profile).add(profile)
