"""Cake aggregate and allergen label parsing."""

import json
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from bakeandtaste.catalogue.events import CakeAdded, CakeAvailabilityChanged, CakeDetailsUpdated
from bakeandtaste.domain import bakeandtaste
from bakeandtaste.shared.money import format_amount, to_decimal

DEFAULT_PREPARATION_HOURS = 24

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


def parse_allergens(raw) -> list[str]:
    """Split free-text allergen labels on commas.

    "nuts, dairy,, gluten " -> ["nuts", "dairy", "gluten"]. A list is
    accepted too and cleaned the same way.
    """
    if not raw:
        return []
    tokens = raw.split(",") if isinstance(raw, str) else raw
    return [token.strip() for token in tokens if token and token.strip()]


@bakeandtaste.aggregate
class Cake:
    """A cake on a bakery's menu.

    Only cakes flagged available can be ordered. The price is kept as a
    two-decimal string; use `unit_price()` to work with it.
    """

    bakery_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: String(required=True, max_length=20)
    category: String(max_length=100)
    allergens: Text()  # JSON array of labels
    image_url: String(max_length=500)
    available: Boolean(default=True)
    preparation_time_hours: Integer(default=DEFAULT_PREPARATION_HOURS, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def price_must_be_positive(self):
        try:
            amount = Decimal(self.price)
        except (InvalidOperation, TypeError):
            raise ValidationError({"price": [f"'{self.price}' is not a valid amount"]}) from None
        if amount <= 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @classmethod
    def add(
        cls,
        bakery_id,
        name,
        price,
        description=None,
        category=None,
        allergens=None,
        image_url=None,
        available=True,
        preparation_time_hours=DEFAULT_PREPARATION_HOURS,
    ):
        now = datetime.now(UTC)
        cake = cls(
            bakery_id=bakery_id,
            name=name,
            description=description,
            price=format_amount(price),
            category=category,
            allergens=json.dumps(parse_allergens(allergens)),
            image_url=image_url,
            available=available,
            preparation_time_hours=preparation_time_hours,
            created_at=now,
            updated_at=now,
        )
        cake.raise_(
            CakeAdded(
                cake_id=cake.id,
                bakery_id=bakery_id,
                name=name,
                price=cake.price,
                available=available,
                added_at=now,
            )
        )
        return cake

    def unit_price(self) -> Decimal:
        return to_decimal(self.price)

    def allergen_labels(self) -> list[str]:
        return json.loads(self.allergens) if self.allergens else []

    def update_details(
        self,
        name=_UNSET,
        description=_UNSET,
        price=_UNSET,
        category=_UNSET,
        allergens=_UNSET,
        image_url=_UNSET,
        preparation_time_hours=_UNSET,
    ):
        """Apply a partial edit.

        Arguments that are not passed keep their value. Passing None clears
        the optional details (description, category, allergens, image).
        """
        if name is not _UNSET:
            self.name = name
        if description is not _UNSET:
            self.description = description
        if price is not _UNSET:
            self.price = format_amount(price)
        if category is not _UNSET:
            self.category = category
        if allergens is not _UNSET:
            self.allergens = json.dumps(parse_allergens(allergens))
        if image_url is not _UNSET:
            self.image_url = image_url
        if preparation_time_hours is not _UNSET:
            self.preparation_time_hours = preparation_time_hours
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CakeDetailsUpdated(
                cake_id=self.id,
                bakery_id=self.bakery_id,
                name=self.name,
                price=self.price,
                category=self.category,
                preparation_time_hours=self.preparation_time_hours,
            )
        )

    def set_availability(self, available: bool) -> bool:
        """Put the cake on or off sale. Returns False when nothing changed."""
        if bool(self.available) == available:
            return False

        now = datetime.now(UTC)
        self.available = available
        self.updated_at = now

        self.raise_(
            CakeAvailabilityChanged(
                cake_id=self.id,
                bakery_id=self.bakery_id,
                available=available,
                changed_at=now,
            )
        )
        return True
