"""Tests for principal resolution, role checks and the auth session."""

import pytest
from bakeandtaste.identity.profile import Role
from bakeandtaste.identity.resolver import (
    AuthSession,
    customer_profile,
    get_profile,
    require_role,
    resolve_profile,
    seller_profile,
)
from bakeandtaste.shared.errors import NotFound, Unauthorized


class TestResolveProfile:
    def test_resolves_provisioned_principal(self, customer_id):
        profile = resolve_profile("customer-1")
        assert str(profile.id) == customer_id

    def test_unknown_principal(self):
        with pytest.raises(NotFound):
            resolve_profile("nobody")

    def test_get_profile_unknown(self):
        with pytest.raises(NotFound):
            get_profile("missing-profile")


class TestRoles:
    def test_require_role_passes(self, seller_id):
        profile = get_profile(seller_id)
        assert require_role(profile, Role.SELLER) is profile

    def test_customer_cannot_act_as_seller(self, customer_id):
        with pytest.raises(Unauthorized):
            seller_profile(customer_id)

    def test_seller_cannot_act_as_customer(self, seller_id):
        with pytest.raises(Unauthorized):
            customer_profile(seller_id)


class TestAuthSession:
    def test_sign_in_notifies_listeners(self, customer_id):
        session = AuthSession()
        seen = []
        session.subscribe(seen.append)

        session.publish("customer-1")

        assert len(seen) == 1
        assert str(seen[0].id) == customer_id
        assert session.role == "customer"

    def test_sign_out_publishes_none(self, customer_id):
        session = AuthSession()
        seen = []
        session.subscribe(seen.append)

        session.publish("customer-1")
        session.publish(None)

        assert seen[-1] is None
        assert session.role is None

    def test_unsubscribe_stops_notifications(self, customer_id):
        session = AuthSession()
        seen = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()

        session.publish("customer-1")

        assert seen == []

    def test_each_event_reads_a_fresh_profile(self, make_profile, customer_id):
        from bakeandtaste.identity.details import UpdateProfileDetails
        from protean.utils.globals import current_domain

        session = AuthSession()
        seen = []
        session.subscribe(seen.append)

        session.publish("customer-1")
        current_domain.process(
            UpdateProfileDetails(profile_id=customer_id, display_name="Renamed"),
            asynchronous=False,
        )
        session.publish("customer-1")

        assert seen[0].display_name == "Maya Patel"
        assert seen[1].display_name == "Renamed"

    def test_unknown_principal_propagates(self):
        session = AuthSession()
        seen = []
        session.subscribe(seen.append)

        with pytest.raises(NotFound):
            session.publish("ghost")
        assert seen == []
        assert session.profile is None

    def test_failed_sign_in_drops_previous_principal(self, customer_id):
        session = AuthSession()
        session.publish("customer-1")
        assert session.role == "customer"

        with pytest.raises(NotFound):
            session.publish("ghost")

        assert session.profile is None
        assert session.role is None
