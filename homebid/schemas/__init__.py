from .user import LoginRequest, RegisterRequest, UserResponse
from .property import PropertySummary, PropertyDetail, PropertyBid, ViewCountResponse
from .bid import BidCreate, BidResponse, BidPlacementResponse, UserBidResponse
from .visit import VisitCreate, VisitResponse, UserVisitResponse
from .favorite import FavoriteResponse
