"""Profile aggregate: the marketplace identity of an authenticated principal."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String, Text

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.events import ProfileDetailsUpdated, ProfileProvisioned

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Role(Enum):
    """Which side of the marketplace a profile acts on. Fixed at provisioning."""

    CUSTOMER = "customer"
    SELLER = "seller"


@bakeandtaste.aggregate
class Profile:
    """One profile per principal, created automatically on first sign-in.

    The role decides which operations the profile may invoke: customers
    place orders, sellers run a bakery. There is no role elevation flow.
    """

    principal_id: String(required=True, max_length=255, unique=True)
    role: String(choices=Role, default=Role.CUSTOMER.value)
    display_name: String(max_length=255)
    email: String(max_length=254)
    phone: String(max_length=20)
    address: Text()
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def provision(cls, principal_id, email=None, display_name=None, role=None):
        now = datetime.now(UTC)
        role = role or Role.CUSTOMER.value
        display_name = display_name or email

        profile = cls(
            principal_id=principal_id,
            role=role,
            display_name=display_name,
            email=email,
            created_at=now,
            updated_at=now,
        )
        profile.raise_(
            ProfileProvisioned(
                profile_id=profile.id,
                principal_id=principal_id,
                role=role,
                email=email,
                display_name=display_name,
                provisioned_at=now,
            )
        )
        return profile

    def has_role(self, role: Role) -> bool:
        return self.role == role.value

    def update_details(self, display_name=_UNSET, phone=_UNSET, address=_UNSET):
        if display_name is not _UNSET:
            self.display_name = display_name
        if phone is not _UNSET:
            self.phone = phone
        if address is not _UNSET:
            self.address = address
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProfileDetailsUpdated(
                profile_id=self.id,
                display_name=self.display_name,
                phone=self.phone,
                address=self.address,
            )
        )
