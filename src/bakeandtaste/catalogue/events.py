"""Domain events for the Bakery and Cake aggregates."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from bakeandtaste.domain import bakeandtaste


@bakeandtaste.event(part_of="Bakery")
class BakeryOpened:
    """A seller created their bakery storefront."""

    __version__ = 1

    bakery_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True)
    opened_at: DateTime(required=True)


@bakeandtaste.event(part_of="Bakery")
class BakeryUpdated:
    """A seller changed the details shown on their bakery storefront."""

    __version__ = 1

    bakery_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    address: Text()
    phone: String()
    image_url: String()


@bakeandtaste.event(part_of="Cake")
class CakeAdded:
    """A cake was added to a bakery's catalogue."""

    __version__ = 1

    cake_id: Identifier(required=True)
    bakery_id: Identifier(required=True)
    name: String(required=True)
    price: String(required=True)
    available: Boolean()
    added_at: DateTime(required=True)


@bakeandtaste.event(part_of="Cake")
class CakeDetailsUpdated:
    """A cake's name, description, price or preparation details changed."""

    __version__ = 1

    cake_id: Identifier(required=True)
    bakery_id: Identifier(required=True)
    name: String(required=True)
    price: String(required=True)
    category: String()
    preparation_time_hours: Integer()


@bakeandtaste.event(part_of="Cake")
class CakeAvailabilityChanged:
    """A cake was put on sale or taken off sale."""

    __version__ = 1

    cake_id: Identifier(required=True)
    bakery_id: Identifier(required=True)
    available: Boolean(required=True)
    changed_at: DateTime(required=True)
