"""Tests for the Profile aggregate."""

from bakeandtaste.identity.events import ProfileDetailsUpdated, ProfileProvisioned
from bakeandtaste.identity.profile import Profile, Role
from protean.utils.reflection import declared_fields


class TestProfileConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Profile.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Profile)
        for name in ("principal_id", "role", "display_name", "email", "phone", "address"):
            assert name in fields

    def test_provision_defaults_to_customer(self):
        profile = Profile.provision(principal_id="auth|1", email="maya@example.com")
        assert profile.role == Role.CUSTOMER.value
        assert profile.has_role(Role.CUSTOMER)
        assert not profile.has_role(Role.SELLER)

    def test_display_name_falls_back_to_email(self):
        profile = Profile.provision(principal_id="auth|1", email="maya@example.com")
        assert profile.display_name == "maya@example.com"

    def test_provision_seller(self):
        profile = Profile.provision(principal_id="auth|2", email="ana@example.com", role="seller")
        assert profile.has_role(Role.SELLER)

    def test_provision_raises_event(self):
        profile = Profile.provision(principal_id="auth|1", email="maya@example.com", display_name="Maya")
        assert len(profile._events) == 1
        event = profile._events[0]
        assert isinstance(event, ProfileProvisioned)
        assert event.principal_id == "auth|1"
        assert event.role == "customer"


class TestProfileDetails:
    def test_partial_update_keeps_other_fields(self):
        profile = Profile.provision(principal_id="auth|1", email="maya@example.com", display_name="Maya")
        profile._events.clear()

        profile.update_details(phone="+1-555-0142")

        assert profile.phone == "+1-555-0142"
        assert profile.display_name == "Maya"
        assert isinstance(profile._events[0], ProfileDetailsUpdated)

    def test_update_address(self):
        profile = Profile.provision(principal_id="auth|1", email="maya@example.com")
        profile.update_details(address="12 Baker Street")
        assert profile.address == "12 Baker Street"
