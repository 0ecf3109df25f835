from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie

from homebid.core.config import settings
from homebid.core.exceptions import HomeBidError, Unauthenticated
from homebid.models.user import User
from homebid.services.auth_service import AuthService
from homebid.services.bid_ledger import BidLedger

# Session cookie scheme; auto_error is off so anonymous callers reach the route
session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


async def get_session_token(token: Optional[str] = Depends(session_cookie)) -> Optional[str]:
    return token


async def get_optional_user(token: Optional[str] = Depends(get_session_token)) -> Optional[User]:
    """Current user if the request carries a live session, else None"""
    return await AuthService.resolve_session(token)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Unauthenticated.message
        )
    return user


def get_bid_ledger() -> BidLedger:
    """Ledger used by the routes; tests override this dependency"""
    return BidLedger()


def http_error(error: HomeBidError) -> HTTPException:
    """Translate a domain error into the HTTP error the client sees"""
    return HTTPException(status_code=error.status_code, detail=error.message)
