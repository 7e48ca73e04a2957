"""Seller-driven order status changes."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.resolver import seller_profile
from bakeandtaste.ordering.order import Order, OrderStatus
from bakeandtaste.shared.errors import Unauthorized, not_found
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


@bakeandtaste.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@bakeandtaste.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        target = OrderStatus.parse(command.status)
        seller_profile(command.seller_id)

        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise not_found("Order", command.order_id) from None

        try:
            bakery = current_domain.repository_for(Bakery).get(order.bakery_id)
        except ObjectNotFoundError:
            raise not_found("Bakery", order.bakery_id) from None

        if not bakery.is_owned_by(command.seller_id):
            logger.warning(
                "status_change_rejected",
                order_id=str(order.id),
                seller_id=str(command.seller_id),
                bakery_id=str(order.bakery_id),
            )
            raise Unauthorized({"order_id": ["This order belongs to another bakery"]})

        previous = order.status
        order.change_status(target)
        repo.add(order)

        logger.info(
            "order_status_changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
        )
        return str(order.id)
