"""Order aggregate: one customer, one cake, a fixed total and a status chain.

Status chain:
    PENDING -> CONFIRMED -> IN_PROGRESS -> READY -> COMPLETED
    CANCELLED from any state that is not COMPLETED or CANCELLED

Only forward moves along the chain are accepted. The total and the
bakery are copied from the cake when the order is placed and are never
touched again.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, Text

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.ordering.events import OrderPlaced, OrderStatusChanged
from bakeandtaste.shared.errors import InvalidInput, InvalidTransition
from bakeandtaste.shared.money import format_amount


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value) -> "OrderStatus":
        try:
            return cls(value)
        except ValueError:
            expected = ", ".join(s.value for s in cls)
            raise InvalidInput({"status": [f"Unknown status '{value}'. Expected one of: {expected}"]}) from None


class DeliveryType(Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.IN_PROGRESS, OrderStatus.CANCELLED},
    OrderStatus.IN_PROGRESS: {OrderStatus.READY, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATUSES = frozenset(s for s, targets in _VALID_TRANSITIONS.items() if not targets)


@bakeandtaste.aggregate
class Order:
    customer_id = Identifier(required=True)
    cake_id = Identifier(required=True)
    bakery_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    total_amount = String(required=True, max_length=20)
    delivery_type = String(required=True, max_length=20, choices=DeliveryType)
    delivery_address = Text()
    preferred_time = DateTime()
    special_instructions = Text()
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(max_length=20, choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        customer_id,
        cake,
        quantity: int,
        delivery_type: DeliveryType,
        delivery_address=None,
        preferred_time=None,
        special_instructions=None,
    ):
        """Create a pending order priced from the cake as it is right now."""
        now = datetime.now(UTC)
        total = format_amount(cake.unit_price() * quantity)

        order = cls(
            customer_id=customer_id,
            cake_id=cake.id,
            bakery_id=cake.bakery_id,
            quantity=quantity,
            total_amount=total,
            delivery_type=delivery_type.value,
            delivery_address=delivery_address if delivery_type == DeliveryType.DELIVERY else None,
            preferred_time=preferred_time,
            special_instructions=special_instructions,
            status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                cake_id=cake.id,
                bakery_id=cake.bakery_id,
                quantity=quantity,
                total_amount=total,
                delivery_type=delivery_type.value,
                placed_at=now,
            )
        )
        return order

    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATUSES

    def change_status(self, target: OrderStatus):
        current = OrderStatus(self.status)
        if self.is_terminal():
            raise InvalidTransition({"status": [f"Order is already {current.value} and cannot change"]})
        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidTransition({"status": [f"Cannot move an order from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                bakery_id=self.bakery_id,
                previous_status=current.value,
                new_status=target.value,
                total_amount=self.total_amount,
                changed_at=now,
            )
        )
