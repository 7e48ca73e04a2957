"""Repositories for the Bakery and Cake aggregates."""

from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.catalogue.cake import Cake
from bakeandtaste.domain import bakeandtaste


@bakeandtaste.repository(part_of=Bakery)
class BakeryRepository:
    def find_by_seller(self, seller_id: str) -> Bakery | None:
        bakeries = self._dao.query.filter(seller_id=str(seller_id)).order_by("created_at").all().items
        return bakeries[0] if bakeries else None


@bakeandtaste.repository(part_of=Cake)
class CakeRepository:
    def available(self, limit: int = 100, offset: int = 0) -> list[Cake]:
        """Cakes on sale across all bakeries, newest first."""
        return (
            self._dao.query.filter(available=True)
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )

    def for_bakery(self, bakery_id: str, limit: int = 100, offset: int = 0) -> list[Cake]:
        """Every cake of one bakery, on sale or not, newest first."""
        return (
            self._dao.query.filter(bakery_id=str(bakery_id))
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )

    def count_for_bakery(self, bakery_id: str) -> int:
        return self._dao.query.filter(bakery_id=str(bakery_id)).all().total

    def remove(self, cake: Cake) -> None:
        """Delete a cake outright. Callers make sure no order refers to it."""
        self._dao.delete(cake)
