"""Application tests for the menu handlers."""

import pytest
from bakeandtaste.catalogue.cake import Cake
from bakeandtaste.catalogue.menu import RemoveCake, SetCakeAvailability, UpdateCake
from bakeandtaste.shared.errors import InvalidInput, NotFound, Unauthorized
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


class TestAddCake:
    def test_add_cake(self, make_cake, seller_id, bakery_id):
        cake_id = make_cake(seller_id, bakery_id, allergens="nuts, dairy,, gluten ", preparation_time_hours=48)

        cake = current_domain.repository_for(Cake).get(cake_id)
        assert cake.name == "Chocolate Cake"
        assert cake.price == "25.00"
        assert cake.allergen_labels() == ["nuts", "dairy", "gluten"]
        assert cake.preparation_time_hours == 48
        assert cake.available is True

    def test_zero_preparation_time_allowed(self, make_cake, seller_id, bakery_id):
        cake_id = make_cake(seller_id, bakery_id, preparation_time_hours=0)
        assert current_domain.repository_for(Cake).get(cake_id).preparation_time_hours == 0

    @pytest.mark.parametrize("price", ["0", "-3.00", "abc", "12.345", None])
    def test_invalid_price_rejected(self, make_cake, seller_id, bakery_id, price):
        with pytest.raises(InvalidInput):
            make_cake(seller_id, bakery_id, price=price)

    def test_negative_preparation_time_rejected(self, make_cake, seller_id, bakery_id):
        with pytest.raises(InvalidInput):
            make_cake(seller_id, bakery_id, preparation_time_hours=-2)

    def test_blank_name_rejected(self, make_cake, seller_id, bakery_id):
        with pytest.raises(InvalidInput):
            make_cake(seller_id, bakery_id, name=" ")

    def test_other_seller_cannot_add(self, make_cake, bakery_id, other_seller_id):
        with pytest.raises(Unauthorized):
            make_cake(other_seller_id, bakery_id)


class TestUpdateCake:
    def test_partial_update(self, seller_id, cake_id):
        command = UpdateCake(seller_id=seller_id, cake_id=cake_id, price="30", category="Wedding")
        current_domain.process(command, asynchronous=False)

        cake = current_domain.repository_for(Cake).get(cake_id)
        assert cake.price == "30.00"
        assert cake.category == "Wedding"
        assert cake.name == "Chocolate Cake"

    def test_clear_optional_details(self, make_cake, seller_id, bakery_id):
        cake_id = make_cake(seller_id, bakery_id, description="Dark sponge", category="Birthday", allergens="nuts")

        command = UpdateCake(seller_id=seller_id, cake_id=cake_id, clear=["description", "allergens"])
        current_domain.process(command, asynchronous=False)

        cake = current_domain.repository_for(Cake).get(cake_id)
        assert cake.description is None
        assert cake.allergen_labels() == []
        assert cake.category == "Birthday"

    def test_omitted_details_are_kept(self, make_cake, seller_id, bakery_id):
        cake_id = make_cake(seller_id, bakery_id, description="Dark sponge")

        current_domain.process(UpdateCake(seller_id=seller_id, cake_id=cake_id, name="Fudge Cake"), asynchronous=False)

        cake = current_domain.repository_for(Cake).get(cake_id)
        assert cake.name == "Fudge Cake"
        assert cake.description == "Dark sponge"

    @pytest.mark.parametrize("field", ["name", "price", "nonsense"])
    def test_required_details_cannot_be_cleared(self, seller_id, cake_id, field):
        command = UpdateCake(seller_id=seller_id, cake_id=cake_id, clear=[field])
        with pytest.raises(InvalidInput) as exc:
            current_domain.process(command, asynchronous=False)
        assert "clear" in exc.value.messages

    def test_set_and_clear_same_detail_rejected(self, seller_id, cake_id):
        command = UpdateCake(seller_id=seller_id, cake_id=cake_id, category="Wedding", clear=["category"])
        with pytest.raises(InvalidInput):
            current_domain.process(command, asynchronous=False)

    def test_other_seller_cannot_update(self, other_seller_id, cake_id):
        command = UpdateCake(seller_id=other_seller_id, cake_id=cake_id, name="Stolen")
        with pytest.raises(Unauthorized):
            current_domain.process(command, asynchronous=False)

    def test_unknown_cake(self, seller_id, bakery_id):
        command = UpdateCake(seller_id=seller_id, cake_id="missing", name="x")
        with pytest.raises(NotFound):
            current_domain.process(command, asynchronous=False)


class TestSetCakeAvailability:
    def test_is_idempotent(self, seller_id, cake_id):
        command = SetCakeAvailability(seller_id=seller_id, cake_id=cake_id, available=False)

        assert current_domain.process(command, asynchronous=False) is False
        assert current_domain.process(command, asynchronous=False) is False

        assert current_domain.repository_for(Cake).get(cake_id).available is False

    def test_other_seller_cannot_toggle(self, other_seller_id, cake_id):
        command = SetCakeAvailability(seller_id=other_seller_id, cake_id=cake_id, available=False)
        with pytest.raises(Unauthorized):
            current_domain.process(command, asynchronous=False)

        assert current_domain.repository_for(Cake).get(cake_id).available is True


class TestRemoveCake:
    def test_remove_unordered_cake(self, seller_id, bakery_id, cake_id):
        current_domain.process(RemoveCake(seller_id=seller_id, cake_id=cake_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Cake).get(cake_id)
        assert current_domain.repository_for(Cake).count_for_bakery(bakery_id) == 0

    def test_other_seller_cannot_remove(self, other_seller_id, cake_id):
        with pytest.raises(Unauthorized):
            current_domain.process(RemoveCake(seller_id=other_seller_id, cake_id=cake_id), asynchronous=False)

    def test_ordered_cake_cannot_be_removed(self, seller_id, cake_id, customer_id, place_order):
        place_order(customer_id, cake_id)

        with pytest.raises(InvalidInput):
            current_domain.process(RemoveCake(seller_id=seller_id, cake_id=cake_id), asynchronous=False)

        assert current_domain.repository_for(Cake).get(cake_id) is not None
