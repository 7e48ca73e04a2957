"""Bakery order stats: the order figures on a seller's dashboard.

One record per bakery, keyed by bakery id. Revenue counts the fixed
total of every order that has not been cancelled.
"""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.ordering.events import OrderPlaced, OrderStatusChanged
from bakeandtaste.ordering.order import Order, OrderStatus
from bakeandtaste.shared.money import format_amount, to_decimal


@bakeandtaste.projection
class BakeryOrderStats:
    bakery_id = Identifier(identifier=True, required=True)
    total_orders = Integer(default=0)
    pending_orders = Integer(default=0)
    total_revenue = String(default="0.00", max_length=20)
    updated_at = DateTime()


def _get_or_create(bakery_id):
    repo = current_domain.repository_for(BakeryOrderStats)
    try:
        return repo.get(str(bakery_id))
    except ObjectNotFoundError:
        return BakeryOrderStats(
            bakery_id=str(bakery_id),
            total_orders=0,
            pending_orders=0,
            total_revenue="0.00",
        )


@bakeandtaste.projector(projector_for=BakeryOrderStats, aggregates=[Order])
class BakeryOrderStatsProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        record = _get_or_create(event.bakery_id)
        record.total_orders = (record.total_orders or 0) + 1
        record.pending_orders = (record.pending_orders or 0) + 1
        record.total_revenue = format_amount(to_decimal(record.total_revenue) + to_decimal(event.total_amount))
        record.updated_at = event.placed_at
        current_domain.repository_for(BakeryOrderStats).add(record)

    @on(OrderStatusChanged)
    def on_order_status_changed(self, event):
        record = _get_or_create(event.bakery_id)
        if event.previous_status == OrderStatus.PENDING.value:
            record.pending_orders = max((record.pending_orders or 0) - 1, 0)
        if event.new_status == OrderStatus.CANCELLED.value:
            record.total_revenue = format_amount(to_decimal(record.total_revenue) - to_decimal(event.total_amount))
        record.updated_at = event.changed_at
        current_domain.repository_for(BakeryOrderStats).add(record)
