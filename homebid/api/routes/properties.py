from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from uuid import UUID

from homebid.api.dependencies import get_bid_ledger, get_optional_user, http_error
from homebid.core.exceptions import HomeBidError
from homebid.models.user import User
from homebid.schemas.property import PropertyDetail, PropertySummary, ViewCountResponse
from homebid.services.bid_ledger import BidLedger
from homebid.services.property_service import PropertyService

router = APIRouter()


@router.get("", response_model=List[PropertySummary])
async def list_properties(
    zip_code: Optional[str] = Query(None, alias="zipCode", max_length=10),
    ledger: BidLedger = Depends(get_bid_ledger)
):
    """
    Returns all listings, newest first.

    Args:
        zip_code (str, optional): exact zip code filter (`?zipCode=`).

    Returns:
        List[PropertySummary]: listings, each with `topBid` (amount or null).
    """
    return await PropertyService.list_properties(ledger, zip_code=zip_code)


@router.get("/{property_id}", response_model=PropertyDetail)
async def get_property(
    property_id: UUID,
    ledger: BidLedger = Depends(get_bid_ledger),
    user: Optional[User] = Depends(get_optional_user)
):
    """
    Returns one listing with its top bid and full bid history.

    Bids carry amount and time only. `isFavorite` is filled in for
    logged-in callers and null for anonymous ones.

    Raises:
        HTTPException: 404 if the property does not exist.
    """
    try:
        return await PropertyService.get_property_detail(ledger, property_id, user=user)
    except HomeBidError as e:
        raise http_error(e)


@router.post("/{property_id}/view", response_model=ViewCountResponse)
async def register_view(property_id: UUID):
    """Counts a page view. Not idempotent: every call increments."""
    try:
        view_count = await PropertyService.increment_view_count(property_id)
    except HomeBidError as e:
        raise http_error(e)
    return ViewCountResponse(view_count=view_count)
