"""Order placement: command and handler.

Checks run in a fixed order and each failure has its own error kind:
quantity, cake availability, then delivery details. The order row and
its total are written in the handler's unit of work, so a failed check
leaves nothing behind.
"""

from protean import handle
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.store import get_available_cake
from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.resolver import customer_profile
from bakeandtaste.ordering.order import DeliveryType, Order
from bakeandtaste.shared.errors import CakeUnavailable, InvalidInput, NotFound
from bakeandtaste.shared.money import MAX_AMOUNT
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)

MAX_QUANTITY = 1000


@bakeandtaste.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    cake_id = Identifier(required=True)
    quantity = Integer()
    delivery_type = String(max_length=20)
    delivery_address = Text()
    preferred_time = DateTime()
    special_instructions = Text()


def _delivery_type(value) -> DeliveryType:
    try:
        return DeliveryType(value)
    except ValueError:
        message = f"Unknown delivery type '{value}'. Expected pickup or delivery"
        raise InvalidInput({"delivery_type": [message]}) from None


@bakeandtaste.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        customer_profile(command.customer_id)

        if command.quantity is None or command.quantity < 1:
            raise InvalidInput({"quantity": ["Quantity must be at least 1"]})
        if command.quantity > MAX_QUANTITY:
            raise InvalidInput({"quantity": [f"Quantity must not exceed {MAX_QUANTITY}"]})

        try:
            cake = get_available_cake(command.cake_id)
        except NotFound:
            logger.info("cake_unavailable", cake_id=str(command.cake_id), customer_id=str(command.customer_id))
            raise CakeUnavailable({"cake_id": ["This cake is not available for ordering"]}) from None

        if cake.unit_price() * command.quantity > MAX_AMOUNT:
            raise InvalidInput({"quantity": [f"Order total must not exceed {MAX_AMOUNT}"]})

        delivery_type = _delivery_type(command.delivery_type)
        address = (command.delivery_address or "").strip() or None
        if delivery_type == DeliveryType.DELIVERY and address is None:
            raise InvalidInput({"delivery_address": ["A delivery address is required for delivery orders"]})

        order = Order.place(
            customer_id=command.customer_id,
            cake=cake,
            quantity=command.quantity,
            delivery_type=delivery_type,
            delivery_address=address,
            preferred_time=command.preferred_time,
            special_instructions=command.special_instructions,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            cake_id=str(cake.id),
            bakery_id=str(order.bakery_id),
            quantity=order.quantity,
            total_amount=order.total_amount,
        )
        return str(order.id)
