from fastapi import APIRouter, Depends, Response, status
from uuid import UUID

from homebid.api.dependencies import get_current_user, http_error
from homebid.core.exceptions import HomeBidError
from homebid.models.user import User
from homebid.schemas.favorite import FavoriteResponse
from homebid.services.favorite_service import FavoriteService

router = APIRouter()


@router.post("/{property_id}/favorite", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(property_id: UUID, response: Response, user: User = Depends(get_current_user)):
    """
    Adds a property to the user's favorites.

    Idempotent: favoriting again returns the existing record with 200.

    Raises:
        HTTPException: 401 if not logged in, 404 if the property does not exist.
    """
    try:
        favorite, created = await FavoriteService.add_favorite(user.id, property_id)
    except HomeBidError as e:
        raise http_error(e)

    if not created:
        response.status_code = status.HTTP_200_OK
    return favorite


@router.delete("/{property_id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(property_id: UUID, user: User = Depends(get_current_user)):
    """Removes a property from favorites; removing a missing favorite is a no-op"""
    await FavoriteService.remove_favorite(user.id, property_id)
