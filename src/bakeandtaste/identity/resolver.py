"""Identity resolution: principal -> profile, role checks and the auth session.

Every other service asks this module who the caller is. Nothing here is
cached; each call reads the current profile from the store.
"""

from collections.abc import Callable

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bakeandtaste.identity.profile import Profile, Role
from bakeandtaste.shared.errors import Unauthorized, backend_guard, not_found
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


@backend_guard()
def resolve_profile(principal_id: str) -> Profile:
    """Map an authenticated principal to its profile.

    Raises `NotFound` if the principal was never provisioned.
    """
    profile = current_domain.repository_for(Profile).find_by_principal(principal_id)
    if profile is None:
        raise not_found("Profile for principal", principal_id)
    return profile


@backend_guard()
def get_profile(profile_id: str) -> Profile:
    try:
        return current_domain.repository_for(Profile).get(profile_id)
    except ObjectNotFoundError:
        raise not_found("Profile", profile_id) from None


def require_role(profile: Profile, role: Role) -> Profile:
    if not profile.has_role(role):
        logger.warning(
            "role_rejected",
            profile_id=str(profile.id),
            role=profile.role,
            required=role.value,
        )
        raise Unauthorized({"role": [f"This operation requires a {role.value} profile"]})
    return profile


def seller_profile(profile_id: str) -> Profile:
    return require_role(get_profile(profile_id), Role.SELLER)


def customer_profile(profile_id: str) -> Profile:
    return require_role(get_profile(profile_id), Role.CUSTOMER)


ProfileListener = Callable[[Profile | None], None]


class AuthSession:
    """The signed-in principal, observed as a stream of sign-in/sign-out events.

    The authentication adapter calls `publish` with the principal id on
    sign-in (or None on sign-out). Each event resolves the profile afresh
    and hands it to every subscriber. A failed resolution propagates to
    the publisher without calling any subscriber and leaves the session
    signed out.
    """

    def __init__(self):
        self._listeners: list[ProfileListener] = []
        self.profile: Profile | None = None

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, principal_id: str | None) -> Profile | None:
        self.profile = None
        if principal_id:
            self.profile = resolve_profile(principal_id)
        for listener in list(self._listeners):
            listener(self.profile)
        return self.profile

    @property
    def role(self) -> str | None:
        return self.profile.role if self.profile else None
