"""Domain events for the Order aggregate.

Amounts travel as two-decimal strings, the same form the aggregate
persists them in.
"""

from protean.fields import DateTime, Identifier, Integer, String

from bakeandtaste.domain import bakeandtaste


@bakeandtaste.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order for a cake. The total is final."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    cake_id = Identifier(required=True)
    bakery_id = Identifier(required=True)
    quantity = Integer(required=True)
    total_amount = String(required=True)
    delivery_type = String(required=True)
    placed_at = DateTime(required=True)


@bakeandtaste.event(part_of="Order")
class OrderStatusChanged:
    """The bakery moved an order along its status chain."""

    __version__ = 1

    order_id = Identifier(required=True)
    bakery_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    total_amount = String(required=True)
    changed_at = DateTime(required=True)
