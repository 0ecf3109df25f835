"""Bid ledger: admission, ranking and lookup of bids per property.

Bids are append-only. A bid is admitted only when it is strictly above the
asking price and strictly above the current top bid, and the check and the
insert happen in one transaction holding a row lock on the property, so two
bidders racing on the same property are serialized by the database.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Iterable, List, Optional
from uuid import UUID

from loguru import logger
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.transactions import in_transaction

from homebid.core.exceptions import (
    AuctionClosed,
    BidBelowAskingPrice,
    BidBelowTopBid,
    BidRejected,
    InvalidBidAmount,
    PropertyNotFound,
)
from homebid.models.bid import Bid
from homebid.models.property import Property
from homebid.models.user import User

CENTS = Decimal("0.01")
MAX_INTEGER_DIGITS = 10


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BidPlacement:
    """Outcome of an admitted bid"""
    bid: Bid
    top_bid: Bid


class BidLedger:
    def __init__(self, now: Callable[[], datetime] = utcnow):
        self._now = now

    @staticmethod
    def rank(bids: Iterable[Bid]) -> List[Bid]:
        """Highest amount first; equal amounts go to the earliest bid.

        Ranking is done here rather than in SQL because SQLite keeps
        decimals as text, where ORDER BY compares lexicographically.
        """
        return sorted(bids, key=lambda bid: (-bid.amount, bid.created_at, str(bid.id)))

    @staticmethod
    def _normalize_amount(amount) -> Decimal:
        try:
            amount = Decimal(str(amount))
        except (InvalidOperation, ValueError):
            raise InvalidBidAmount()
        if not amount.is_finite() or amount <= 0:
            raise InvalidBidAmount()
        # Must fit numeric(12, 2) exactly; amounts are never rounded
        if amount.adjusted() >= MAX_INTEGER_DIGITS:
            raise InvalidBidAmount()
        if amount != amount.quantize(CENTS):
            raise InvalidBidAmount()
        return amount.quantize(CENTS)

    async def list_bids_descending(
        self,
        property_id: UUID,
        using_db: Optional[BaseDBAsyncClient] = None
    ) -> List[Bid]:
        """All bids for a property, best first. Recomputed on every call."""
        query = Bid.filter(property_id=property_id)
        if using_db is not None:
            query = query.using_db(using_db)
        return self.rank(await query)

    async def get_top_bid(
        self,
        property_id: UUID,
        using_db: Optional[BaseDBAsyncClient] = None
    ) -> Optional[Bid]:
        ranked = await self.list_bids_descending(property_id, using_db=using_db)
        return ranked[0] if ranked else None

    async def get_top_bid_amounts(self, property_ids: Iterable[UUID]) -> Dict[UUID, Decimal]:
        """Top bid amount per property, for listing pages"""
        property_ids = list(property_ids)
        if not property_ids:
            return {}

        rows = await Bid.filter(property_id__in=property_ids).values_list("property_id", "amount")
        top: Dict[UUID, Decimal] = {}
        for property_id, amount in rows:
            if not isinstance(property_id, UUID):
                property_id = UUID(str(property_id))
            amount = Decimal(amount)
            if property_id not in top or amount > top[property_id]:
                top[property_id] = amount
        return top

    async def submit_bid(self, property_id: UUID, bidder: User, amount) -> BidPlacement:
        """Validate and append a bid.

        Checks, in order: the property exists, the amount is positive, the
        amount beats the asking price, the auction is still open, and the
        amount beats the current top bid.

        Raises:
            PropertyNotFound: no property with this id.
            InvalidBidAmount: amount is not a positive number with at most
                two decimals that fits the amount column.
            BidBelowAskingPrice, AuctionClosed, BidBelowTopBid: the bid is
                not admissible; nothing is written.
        """
        async with in_transaction() as connection:
            prop = await Property.select_for_update().using_db(connection).get_or_none(id=property_id)
            if prop is None:
                raise PropertyNotFound()

            amount = self._normalize_amount(amount)

            try:
                if amount <= prop.asking_price:
                    raise BidBelowAskingPrice()

                if prop.is_closed(self._now()):
                    raise AuctionClosed()

                top_bid = await self.get_top_bid(property_id, using_db=connection)
                if top_bid is not None and amount <= top_bid.amount:
                    raise BidBelowTopBid()
            except BidRejected as e:
                logger.info(f"Bid of {amount} on property {property_id} by {bidder.email} rejected: {e.message}")
                raise

            bid = await Bid.create(property=prop, user=bidder, amount=amount, using_db=connection)

        logger.info(f"Bid {bid.id} of {amount} accepted on property {property_id} by {bidder.email}")
        # An admitted bid is strictly above every earlier one
        return BidPlacement(bid=bid, top_bid=bid)

    async def get_user_bids(self, user_id: UUID) -> List[Bid]:
        """Bids placed by a user, newest first, with their property loaded"""
        return await Bid.filter(user_id=user_id).order_by("-created_at").prefetch_related("property")
