from .user import User
from .session import UserSession
from .property import Property
from .bid import Bid
from .visit import Visit
from .favorite import Favorite
