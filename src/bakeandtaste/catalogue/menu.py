"""Menu management: sellers add, edit, remove and toggle their cakes."""

from protean import handle
from protean.fields import Boolean, Identifier, Integer, List, String, Text
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.cake import DEFAULT_PREPARATION_HOURS, Cake
from bakeandtaste.catalogue.store import owned_bakery, owned_cake
from bakeandtaste.domain import bakeandtaste
from bakeandtaste.shared.errors import InvalidInput
from bakeandtaste.shared.money import positive_amount
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


@bakeandtaste.command(part_of="Cake")
class AddCake:
    seller_id: Identifier(required=True)
    bakery_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: String(max_length=20)
    category: String(max_length=100)
    allergens: Text()
    image_url: String(max_length=500)
    available: Boolean(default=True)
    preparation_time_hours: Integer()


@bakeandtaste.command(part_of="Cake")
class UpdateCake:
    seller_id: Identifier(required=True)
    cake_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: String(max_length=20)
    category: String(max_length=100)
    allergens: Text()
    image_url: String(max_length=500)
    preparation_time_hours: Integer()
    clear: List(content_type=String)  # optional details to reset


@bakeandtaste.command(part_of="Cake")
class RemoveCake:
    seller_id: Identifier(required=True)
    cake_id: Identifier(required=True)


@bakeandtaste.command(part_of="Cake")
class SetCakeAvailability:
    seller_id: Identifier(required=True)
    cake_id: Identifier(required=True)
    available: Boolean(required=True)


_CLEARABLE = ("description", "category", "allergens", "image_url")


def _preparation_hours(value):
    if value is not None and value < 0:
        raise InvalidInput({"preparation_time_hours": ["Preparation time cannot be negative"]})
    return value


@bakeandtaste.command_handler(part_of=Cake)
class ManageMenuHandler:
    @handle(AddCake)
    def add_cake(self, command):
        owned_bakery(command.seller_id, command.bakery_id)

        if not command.name or not command.name.strip():
            raise InvalidInput({"name": ["Cake name is required"]})
        price = positive_amount(command.price)
        hours = _preparation_hours(command.preparation_time_hours)

        cake = Cake.add(
            bakery_id=command.bakery_id,
            name=command.name.strip(),
            price=price,
            description=command.description,
            category=command.category,
            allergens=command.allergens,
            image_url=command.image_url,
            available=command.available if command.available is not None else True,
            preparation_time_hours=hours if hours is not None else DEFAULT_PREPARATION_HOURS,
        )
        current_domain.repository_for(Cake).add(cake)

        logger.info("cake_added", cake_id=str(cake.id), bakery_id=str(command.bakery_id), price=cake.price)
        return str(cake.id)

    @handle(UpdateCake)
    def update_cake(self, command):
        cake, _ = owned_cake(command.seller_id, command.cake_id)

        changes = {}
        if command.name is not None:
            if not command.name.strip():
                raise InvalidInput({"name": ["Cake name cannot be blank"]})
            changes["name"] = command.name.strip()
        if command.price is not None:
            changes["price"] = positive_amount(command.price)
        if command.preparation_time_hours is not None:
            changes["preparation_time_hours"] = _preparation_hours(command.preparation_time_hours)

        for field in _CLEARABLE:
            value = getattr(command, field)
            if value is not None:
                changes[field] = value

        for field in command.clear or []:
            if field not in _CLEARABLE:
                expected = ", ".join(_CLEARABLE)
                raise InvalidInput({"clear": [f"'{field}' cannot be cleared. Expected one of: {expected}"]})
            if field in changes:
                raise InvalidInput({"clear": [f"'{field}' is both set and cleared"]})
            changes[field] = None

        cake.update_details(**changes)
        current_domain.repository_for(Cake).add(cake)

        logger.info("cake_updated", cake_id=str(cake.id))
        return str(cake.id)

    @handle(RemoveCake)
    def remove_cake(self, command):
        # Orders keep pointing at the cake they were placed for
        from bakeandtaste.ordering.order import Order

        cake, _ = owned_cake(command.seller_id, command.cake_id)

        if current_domain.repository_for(Order).count_for_cake(cake.id) > 0:
            raise InvalidInput(
                {"cake_id": ["This cake has orders and cannot be removed. Mark it unavailable instead"]}
            )

        current_domain.repository_for(Cake).remove(cake)
        logger.info("cake_removed", cake_id=str(cake.id), bakery_id=str(cake.bakery_id))

    @handle(SetCakeAvailability)
    def set_cake_availability(self, command):
        cake, _ = owned_cake(command.seller_id, command.cake_id)

        if cake.set_availability(bool(command.available)):
            current_domain.repository_for(Cake).add(cake)
            logger.info("cake_availability_changed", cake_id=str(cake.id), available=cake.available)

        return bool(cake.available)
