"""Profile provisioning: command and handler.

Called by the authentication adapter when a principal signs in for the
first time. Safe to repeat: a principal keeps the profile it got first.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.profile import Profile, Role
from bakeandtaste.shared.errors import InvalidInput
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


@bakeandtaste.command(part_of="Profile")
class ProvisionProfile:
    principal_id: String(required=True, max_length=255)
    email: String(max_length=254)
    display_name: String(max_length=255)
    role: String(max_length=20)


@bakeandtaste.command_handler(part_of=Profile)
class ProvisionProfileHandler:
    @handle(ProvisionProfile)
    def provision_profile(self, command):
        repo = current_domain.repository_for(Profile)

        existing = repo.find_by_principal(command.principal_id)
        if existing is not None:
            return str(existing.id)

        role = command.role or Role.CUSTOMER.value
        if role not in {r.value for r in Role}:
            raise InvalidInput({"role": [f"Unknown role '{role}'. Expected one of: customer, seller"]})

        profile = Profile.provision(
            principal_id=command.principal_id,
            email=command.email,
            display_name=command.display_name,
            role=role,
        )
        repo.add(profile)

        logger.info("profile_provisioned", profile_id=str(profile.id), role=role)
        return str(profile.id)
