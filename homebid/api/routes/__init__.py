from .auth import router as auth_router
from .properties import router as properties_router
from .bids import router as bids_router
from .visits import router as visits_router
from .favorites import router as favorites_router
from .user import router as user_router
