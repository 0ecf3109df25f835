import bcrypt
from loguru import logger

from homebid.core.config import settings


class PasswordHasher:
    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """bcrypt verification, constant-time on the digest comparison"""
        try:
            return bcrypt.checkpw(
                plain_password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError as e:
            logger.error(f"Password verification failed: {e}")
            return False

    def get_password_hash(self, password: str) -> str:
        return bcrypt.hashpw(
            password.encode('utf-8'),
            bcrypt.gensalt(rounds=self.rounds)
        ).decode('utf-8')


# Initialize the hasher at module level
hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

# Public interface
verify_password = hasher.verify_password
get_password_hash = hasher.get_password_hash
