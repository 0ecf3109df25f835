from fastapi import APIRouter, Depends, status
from typing import List
from uuid import UUID

from homebid.api.dependencies import get_bid_ledger, get_current_user, http_error
from homebid.core.exceptions import HomeBidError
from homebid.models.user import User
from homebid.schemas.bid import BidCreate, BidPlacementResponse, BidResponse
from homebid.schemas.property import PropertyBid
from homebid.services.bid_ledger import BidLedger
from homebid.services.property_service import PropertyService

router = APIRouter()


@router.get("/{property_id}/bids", response_model=List[PropertyBid])
async def get_property_bids(property_id: UUID, ledger: BidLedger = Depends(get_bid_ledger)):
    """
    Returns the bids on a property, highest first.

    Bidder identity is not exposed.

    Raises:
        HTTPException: 404 if the property does not exist.
    """
    try:
        await PropertyService.get_property(property_id)
    except HomeBidError as e:
        raise http_error(e)
    return await ledger.list_bids_descending(property_id)


@router.post("/{property_id}/bids", response_model=BidPlacementResponse, status_code=status.HTTP_201_CREATED)
async def place_bid(
    property_id: UUID,
    bid_in: BidCreate,
    user: User = Depends(get_current_user),
    ledger: BidLedger = Depends(get_bid_ledger)
):
    """
    Places a bid on a property.

    The bid must be strictly higher than the asking price and than the
    current top bid, and the auction must not have ended.

    Returns:
        BidPlacementResponse: the stored bid and the refreshed top bid.

    Raises:
        HTTPException:
            400: below asking price, below top bid, or auction ended.
            401: not logged in.
            404: property not found.
    """
    try:
        placement = await ledger.submit_bid(property_id, user, bid_in.amount)
    except HomeBidError as e:
        raise http_error(e)

    return BidPlacementResponse(
        bid=BidResponse.model_validate(placement.bid),
        top_bid=BidResponse.model_validate(placement.top_bid)
    )
