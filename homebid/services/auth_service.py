import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from loguru import logger
from tortoise.exceptions import IntegrityError

from homebid.core.config import settings
from homebid.core.exceptions import DuplicateEmail, InvalidCredentials
from homebid.core.security.pass_hash import get_password_hash, verify_password
from homebid.models.session import UserSession
from homebid.models.user import User

# Checked against when the email is unknown, so a miss costs as much as a wrong password
_DUMMY_PASSWORD_HASH = get_password_hash(secrets.token_hex(16))


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    @staticmethod
    async def register(email: str, first_name: str, last_name: str, password: str) -> User:
        """Create a user account with a bcrypt password hash"""
        email = normalize_email(email)

        if await User.exists(email=email):
            logger.info(f"User with email already exists: {email}")
            raise DuplicateEmail()

        try:
            user = await User.create(
                email=email,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                password_hash=get_password_hash(password),
            )
        except IntegrityError:
            # Lost a race with a concurrent registration
            raise DuplicateEmail()

        logger.info(f"User registered: {user.id}")
        return user

    @staticmethod
    async def authenticate(email: str, password: str) -> User:
        email = normalize_email(email)
        user = await User.get_or_none(email=email)

        if user is None:
            verify_password(password, _DUMMY_PASSWORD_HASH)
            logger.warning(f"Failed login attempt for unknown email {email}")
            raise InvalidCredentials()

        if not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for user {email}")
            raise InvalidCredentials()

        if not user.is_active:
            logger.warning(f"Login attempt for inactive user {email}")
            raise InvalidCredentials()

        return user

    @staticmethod
    async def create_session(user: User) -> UserSession:
        expires_at = datetime.now(timezone.utc) + timedelta(hours=settings.session_expire_hours)
        return await UserSession.create(
            user=user,
            token=secrets.token_urlsafe(48),
            expires_at=expires_at
        )

    @staticmethod
    async def resolve_session(token: Optional[str]) -> Optional[User]:
        """User behind a session token, or None for unknown and expired sessions"""
        if not token:
            return None

        session = await UserSession.get_or_none(token=token).prefetch_related("user")
        if session is None:
            return None

        if session.is_expired():
            await session.delete()
            return None

        if not session.user.is_active:
            return None
        return session.user

    @staticmethod
    async def revoke_session(token: Optional[str]) -> None:
        if token:
            await UserSession.filter(token=token).delete()
