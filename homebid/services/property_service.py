from uuid import UUID
from typing import List, Optional

from tortoise.expressions import F

from homebid.core.exceptions import PropertyNotFound
from homebid.models.property import Property
from homebid.models.user import User
from homebid.models.favorite import Favorite
from homebid.schemas.property import PropertyBid, PropertyDetail, PropertySummary
from homebid.services.bid_ledger import BidLedger


class PropertyService:
    @staticmethod
    async def get_property(property_id: UUID) -> Property:
        prop = await Property.get_or_none(id=property_id)
        if prop is None:
            raise PropertyNotFound()
        return prop

    @staticmethod
    async def list_properties(ledger: BidLedger, zip_code: Optional[str] = None) -> List[PropertySummary]:
        """Newest listings first, each with its current top bid amount"""
        query = Property.all()

        if zip_code:
            query = query.filter(zip_code=zip_code.strip())

        properties = await query.order_by("-created_at")
        top_bids = await ledger.get_top_bid_amounts(prop.id for prop in properties)

        result = []
        for prop in properties:
            summary = PropertySummary.model_validate(prop)
            summary.top_bid = top_bids.get(prop.id)
            result.append(summary)
        return result

    @staticmethod
    async def get_property_detail(
        ledger: BidLedger,
        property_id: UUID,
        user: Optional[User] = None
    ) -> PropertyDetail:
        """Single listing with its bid history; is_favorite is only known for a logged-in caller"""
        prop = await PropertyService.get_property(property_id)
        bids = await ledger.list_bids_descending(prop.id)

        is_favorite = None
        if user is not None:
            is_favorite = await Favorite.exists(user_id=user.id, property_id=prop.id)

        summary = PropertySummary.model_validate(prop)
        return PropertyDetail(
            **summary.model_dump(exclude={"top_bid"}),
            top_bid=bids[0].amount if bids else None,
            bids=[PropertyBid.model_validate(bid) for bid in bids],
            is_favorite=is_favorite,
        )

    @staticmethod
    async def increment_view_count(property_id: UUID) -> int:
        """Always increments; the update is a single atomic SQL statement"""
        updated = await Property.filter(id=property_id).update(view_count=F("view_count") + 1)
        if not updated:
            raise PropertyNotFound()

        prop = await Property.get(id=property_id)
        return prop.view_count
