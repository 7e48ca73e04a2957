"""Repository for the Profile aggregate."""

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.profile import Profile


@bakeandtaste.repository(part_of=Profile)
class ProfileRepository:
    def find_by_principal(self, principal_id: str) -> Profile | None:
        """Return the principal's profile, or None before it is provisioned."""
        profiles = self._dao.query.filter(principal_id=str(principal_id)).all().items
        return profiles[0] if profiles else None
