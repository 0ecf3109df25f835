from uuid import UUID
from typing import List, Tuple

from loguru import logger

from homebid.models.favorite import Favorite
from homebid.services.property_service import PropertyService


class FavoriteService:
    @staticmethod
    async def add_favorite(user_id: UUID, property_id: UUID) -> Tuple[Favorite, bool]:
        """Idempotent: adding an existing favorite returns the stored record"""
        await PropertyService.get_property(property_id)

        favorite, created = await Favorite.get_or_create(user_id=user_id, property_id=property_id)
        if created:
            logger.info(f"User {user_id} favorited property {property_id}")
        return favorite, created

    @staticmethod
    async def remove_favorite(user_id: UUID, property_id: UUID) -> bool:
        deleted = await Favorite.filter(user_id=user_id, property_id=property_id).delete()
        return bool(deleted)

    @staticmethod
    async def is_favorite(user_id: UUID, property_id: UUID) -> bool:
        return await Favorite.exists(user_id=user_id, property_id=property_id)

    @staticmethod
    async def list_user_favorites(user_id: UUID) -> List[Favorite]:
        return await Favorite.filter(user_id=user_id).order_by("-created_at")
