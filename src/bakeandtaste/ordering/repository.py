from bakeandtaste.domain import bakeandtaste
from bakeandtaste.ordering.order import Order


@bakeandtaste.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id: str, limit: int = 100, offset: int = 0) -> list[Order]:
        return (
            self._dao.query.filter(customer_id=str(customer_id))
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )

    def for_bakery(self, bakery_id: str, limit: int = 100, offset: int = 0) -> list[Order]:
        return (
            self._dao.query.filter(bakery_id=str(bakery_id))
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )

    def count_for_cake(self, cake_id: str) -> int:
        return self._dao.query.filter(cake_id=str(cake_id)).all().total
