from fastapi import APIRouter, Depends, Response, status
from loguru import logger

from homebid.api.dependencies import get_current_user, get_session_token, http_error
from homebid.core.config import settings
from homebid.core.exceptions import HomeBidError
from homebid.models.user import User
from homebid.schemas.user import LoginRequest, RegisterRequest, UserResponse
from homebid.services.auth_service import AuthService

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(payload: RegisterRequest, response: Response):
    """
    Registers a new user and logs them in.

    - Checks the email is not taken yet.
    - Hashes the password with bcrypt.
    - Opens a session and sets the session cookie.

    Raises:
        HTTPException: 400 if the email is already registered.
    """
    try:
        user = await AuthService.register(
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            password=payload.password
        )
    except HomeBidError as e:
        raise http_error(e)

    session = await AuthService.create_session(user)
    _set_session_cookie(response, session.token)
    return user


@router.post("/login", response_model=UserResponse)
async def login(payload: LoginRequest, response: Response):
    """
    Checks email and password and opens a session.

    Returns:
        UserResponse: the logged-in user; the session travels in a cookie.

    Raises:
        HTTPException: 401 if the email or password is wrong.
    """
    try:
        user = await AuthService.authenticate(payload.email, payload.password)
    except HomeBidError as e:
        raise http_error(e)

    session = await AuthService.create_session(user)
    _set_session_cookie(response, session.token)
    logger.info(f"User logged in: {user.id}")
    return user


@router.post("/logout")
async def logout(response: Response, token: str | None = Depends(get_session_token)):
    """Drops the server-side session and clears the cookie"""
    await AuthService.revoke_session(token)
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
async def read_current_user(user: User = Depends(get_current_user)):
    """Returns the user behind the current session, 401 otherwise"""
    return user
