"""Domain errors raised by the service layer.

Every error carries the HTTP status the API layer should answer with and a
message that is safe to show to the user.
"""
from typing import Optional

from fastapi import status


class HomeBidError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(HomeBidError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class PropertyNotFound(NotFound):
    message = "Property not found"


class ValidationError(HomeBidError):
    message = "Invalid request"


class InvalidBidAmount(ValidationError):
    message = "Bid amount must be greater than 0"


class InvalidVisitDate(ValidationError):
    message = "Visit date must be in the future"


class BidRejected(HomeBidError):
    """Base class for a bid that is well-formed but not admissible"""
    message = "Bid was rejected"


class BidBelowAskingPrice(BidRejected):
    message = "Bid must be higher than the asking price"


class BidBelowTopBid(BidRejected):
    message = "Bid must be higher than the current top bid"


class AuctionClosed(BidRejected):
    message = "Bidding on this property has ended"


class Unauthenticated(HomeBidError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "You must be logged in"


class DuplicateEmail(HomeBidError):
    message = "Email already exists"


class InvalidCredentials(HomeBidError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"
