"""Domain events for the Profile aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from bakeandtaste.domain import bakeandtaste


@bakeandtaste.event(part_of="Profile")
class ProfileProvisioned:
    """A profile was created for a principal on its first authentication."""

    __version__ = 1

    profile_id: Identifier(required=True)
    principal_id: String(required=True)
    role: String(required=True)
    email: String()
    display_name: String()
    provisioned_at: DateTime(required=True)


@bakeandtaste.event(part_of="Profile")
class ProfileDetailsUpdated:
    """A profile's contact details were changed by its owner."""

    __version__ = 1

    profile_id: Identifier(required=True)
    display_name: String()
    phone: String()
    address: Text()
