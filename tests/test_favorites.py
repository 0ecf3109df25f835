import uuid
import pytest
from httpx import AsyncClient

from homebid.models.favorite import Favorite
from homebid.models.property import Property
from homebid.models.user import User
from homebid.services.favorite_service import FavoriteService


@pytest.mark.asyncio
async def test_favorite_twice_is_idempotent(user_client: AsyncClient, test_user: User, test_property: Property):
    first = await user_client.post(f"/api/properties/{test_property.id}/favorite")
    second = await user_client.post(f"/api/properties/{test_property.id}/favorite")

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert await Favorite.filter(user_id=test_user.id, property_id=test_property.id).count() == 1


@pytest.mark.asyncio
async def test_remove_favorite(user_client: AsyncClient, test_user: User, test_property: Property):
    await user_client.post(f"/api/properties/{test_property.id}/favorite")

    response = await user_client.delete(f"/api/properties/{test_property.id}/favorite")
    assert response.status_code == 204
    assert await Favorite.filter(user_id=test_user.id).count() == 0

    # Removing again is a no-op
    response = await user_client.delete(f"/api/properties/{test_property.id}/favorite")
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_favorite_requires_login(client: AsyncClient, test_property: Property):
    assert (await client.post(f"/api/properties/{test_property.id}/favorite")).status_code == 401
    assert (await client.delete(f"/api/properties/{test_property.id}/favorite")).status_code == 401


@pytest.mark.asyncio
async def test_favorite_unknown_property(user_client: AsyncClient):
    response = await user_client.post(f"/api/properties/{uuid.uuid4()}/favorite")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_my_favorites(user_client: AsyncClient, other_user: User, make_property):
    mine = await make_property(title="Mine")
    theirs = await make_property(title="Theirs")
    await user_client.post(f"/api/properties/{mine.id}/favorite")
    await FavoriteService.add_favorite(other_user.id, theirs.id)

    response = await user_client.get("/api/user/favorites")

    assert response.status_code == 200
    data = response.json()
    assert [item["propertyId"] for item in data] == [str(mine.id)]


@pytest.mark.asyncio
async def test_favorite_service_toggle(test_user: User, test_property: Property):
    favorite, created = await FavoriteService.add_favorite(test_user.id, test_property.id)
    again, created_again = await FavoriteService.add_favorite(test_user.id, test_property.id)

    assert created is True
    assert created_again is False
    assert again.id == favorite.id
    assert await FavoriteService.is_favorite(test_user.id, test_property.id)

    assert await FavoriteService.remove_favorite(test_user.id, test_property.id) is True
    assert await FavoriteService.remove_favorite(test_user.id, test_property.id) is False
    assert not await FavoriteService.is_favorite(test_user.id, test_property.id)
