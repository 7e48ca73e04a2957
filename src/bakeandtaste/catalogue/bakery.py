"""Bakery aggregate: a seller's storefront."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String, Text

from bakeandtaste.catalogue.events import BakeryOpened, BakeryUpdated
from bakeandtaste.domain import bakeandtaste


@bakeandtaste.aggregate
class Bakery:
    """A seller's storefront. Each seller runs at most one bakery.

    The one-bakery-per-seller rule is kept by the upsert handler, not by a
    uniqueness constraint.
    """

    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    address: Text()
    phone: String(max_length=20)
    image_url: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def open(cls, seller_id, name, description=None, address=None, phone=None, image_url=None):
        now = datetime.now(UTC)
        bakery = cls(
            seller_id=seller_id,
            name=name,
            description=description,
            address=address,
            phone=phone,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        bakery.raise_(
            BakeryOpened(
                bakery_id=bakery.id,
                seller_id=seller_id,
                name=name,
                opened_at=now,
            )
        )
        return bakery

    def is_owned_by(self, profile_id) -> bool:
        return str(self.seller_id) == str(profile_id)

    def update_details(self, name, description=None, address=None, phone=None, image_url=None):
        """Replace the storefront details with the submitted form."""
        self.name = name
        self.description = description
        self.address = address
        self.phone = phone
        self.image_url = image_url
        self.updated_at = datetime.now(UTC)

        self.raise_(
            BakeryUpdated(
                bakery_id=self.id,
                name=name,
                description=description,
                address=address,
                phone=phone,
                image_url=image_url,
            )
        )
