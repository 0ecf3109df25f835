from uuid import UUID
from decimal import Decimal

from pydantic import Field, field_serializer

from homebid.schemas.base import CamelModel
from homebid.schemas.property import PropertyBid, PropertySummary


class BidCreate(CamelModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Bid amount, must be positive")


class BidResponse(PropertyBid):
    id: UUID
    property_id: UUID
    user_id: UUID

    @field_serializer("id", "property_id", "user_id")
    def serialize_uuid(self, v: UUID, _info):
        return str(v)


class BidPlacementResponse(CamelModel):
    bid: BidResponse
    top_bid: BidResponse


class UserBidResponse(BidResponse):
    property: PropertySummary
