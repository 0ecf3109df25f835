from .bid_ledger import BidLedger, BidPlacement
from .property_service import PropertyService
from .favorite_service import FavoriteService
from .visit_service import VisitService
from .auth_service import AuthService
