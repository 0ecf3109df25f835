from fastapi import APIRouter, Depends
from typing import List

from homebid.api.dependencies import get_bid_ledger, get_current_user
from homebid.models.user import User
from homebid.schemas.bid import UserBidResponse
from homebid.schemas.favorite import FavoriteResponse
from homebid.schemas.visit import UserVisitResponse
from homebid.services.bid_ledger import BidLedger
from homebid.services.favorite_service import FavoriteService
from homebid.services.visit_service import VisitService

router = APIRouter()


@router.get("/bids", response_model=List[UserBidResponse])
async def get_my_bids(user: User = Depends(get_current_user), ledger: BidLedger = Depends(get_bid_ledger)):
    """Bids placed by the current user, newest first"""
    return await ledger.get_user_bids(user.id)


@router.get("/visits", response_model=List[UserVisitResponse])
async def get_my_visits(user: User = Depends(get_current_user)):
    """Visits scheduled by the current user, newest first"""
    return await VisitService.get_user_visits(user.id)


@router.get("/favorites", response_model=List[FavoriteResponse])
async def get_my_favorites(user: User = Depends(get_current_user)):
    return await FavoriteService.list_user_favorites(user.id)
