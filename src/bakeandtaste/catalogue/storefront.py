"""Bakery storefront: create or edit the seller's bakery."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bakeandtaste.catalogue.bakery import Bakery
from bakeandtaste.catalogue.store import owned_bakery
from bakeandtaste.domain import bakeandtaste
from bakeandtaste.identity.resolver import seller_profile
from bakeandtaste.shared.errors import InvalidInput
from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


@bakeandtaste.command(part_of="Bakery")
class UpsertBakery:
    seller_id: Identifier(required=True)
    bakery_id: Identifier()
    name: String(max_length=255)
    description: Text()
    address: Text()
    phone: String(max_length=20)
    image_url: String(max_length=500)


@bakeandtaste.command_handler(part_of=Bakery)
class StorefrontHandler:
    @handle(UpsertBakery)
    def upsert_bakery(self, command):
        seller_profile(command.seller_id)

        if not command.name or not command.name.strip():
            raise InvalidInput({"name": ["Bakery name is required"]})

        repo = current_domain.repository_for(Bakery)
        details = dict(
            name=command.name.strip(),
            description=command.description,
            address=command.address,
            phone=command.phone,
            image_url=command.image_url,
        )

        # A seller edits the bakery they already have, even without an id
        bakery = (
            owned_bakery(command.seller_id, command.bakery_id)
            if command.bakery_id
            else repo.find_by_seller(command.seller_id)
        )

        if bakery is None:
            bakery = Bakery.open(seller_id=command.seller_id, **details)
            logger.info("bakery_opened", bakery_id=str(bakery.id), seller_id=str(command.seller_id))
        else:
            bakery.update_details(**details)
            logger.info("bakery_updated", bakery_id=str(bakery.id))

        repo.add(bakery)
        return str(bakery.id)
