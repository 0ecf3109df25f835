from uuid import UUID
from decimal import Decimal
from datetime import datetime
from typing import List, Optional

from pydantic import field_serializer

from homebid.schemas.base import CamelModel, serialize_decimal


class PropertySummary(CamelModel):
    id: UUID
    title: str
    address: str
    city: str
    state: str
    zip_code: str
    description: str
    asking_price: Decimal
    beds: int
    baths: Decimal
    square_feet: int
    garage_spaces: int
    featured_image: str
    images: List[str]
    features: List[str]
    is_featured: bool
    is_new_listing: bool
    is_hot_property: bool
    end_date: datetime
    view_count: int
    created_at: datetime
    top_bid: Optional[Decimal] = None

    @field_serializer("id")
    def serialize_id(self, v: UUID, _info):
        return str(v)

    @field_serializer("asking_price", "baths", "top_bid")
    def serialize_amounts(self, v: Optional[Decimal], _info):
        return serialize_decimal(v)


class PropertyBid(CamelModel):
    """Bid as shown on a listing: amount and time only, no bidder identity"""
    amount: Decimal
    created_at: datetime

    @field_serializer("amount")
    def serialize_amount(self, v: Decimal, _info):
        return serialize_decimal(v)


class PropertyDetail(PropertySummary):
    bids: List[PropertyBid] = []
    # None when the caller is anonymous
    is_favorite: Optional[bool] = None


class ViewCountResponse(CamelModel):
    view_count: int
