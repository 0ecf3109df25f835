from typing import Optional

from tortoise import Tortoise
from loguru import logger
from homebid.core.config import settings

MODELS_MODULES = ["homebid.models"]


class DatabaseManager:
    @staticmethod
    async def init(db_url: Optional[str] = None):
        """Initialize the database connection and create missing tables"""
        await Tortoise.init(
            db_url=db_url or settings.database_url,
            modules={"models": MODELS_MODULES},
            use_tz=True,
            timezone=settings.db_timezone,
        )
        await Tortoise.generate_schemas(safe=True)
        logger.info("✅ Database schema initialized")

    @staticmethod
    async def close():
        """Close database connections"""
        await Tortoise.close_connections()
        logger.info("🛑 Database connections closed")
