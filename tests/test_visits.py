import uuid
import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient

from homebid.core.exceptions import InvalidVisitDate
from homebid.models.property import Property
from homebid.models.user import User
from homebid.models.visit import Visit
from homebid.services.visit_service import VisitService


def _future(days: int = 3) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


@pytest.mark.asyncio
async def test_schedule_visit(user_client: AsyncClient, test_user: User, test_property: Property):
    response = await user_client.post(
        f"/api/properties/{test_property.id}/visits",
        json={"visitDate": _future(), "phone": "+15551234567", "questions": "Is the dock shared?"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["propertyId"] == str(test_property.id)
    assert data["userId"] == str(test_user.id)
    assert data["phone"] == "+15551234567"

    # Verify in database
    visit = await Visit.get(id=data["id"])
    assert visit.questions == "Is the dock shared?"


@pytest.mark.asyncio
async def test_schedule_visit_optional_fields(user_client: AsyncClient, test_property: Property):
    response = await user_client.post(
        f"/api/properties/{test_property.id}/visits",
        json={"visitDate": _future()}
    )

    assert response.status_code == 201
    assert response.json()["phone"] is None


@pytest.mark.asyncio
async def test_schedule_visit_in_past(user_client: AsyncClient, test_property: Property):
    response = await user_client.post(
        f"/api/properties/{test_property.id}/visits",
        json={"visitDate": _future(days=-1)}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Visit date must be in the future"
    assert await Visit.all().count() == 0


@pytest.mark.asyncio
async def test_schedule_visit_bad_payload(user_client: AsyncClient, test_property: Property):
    response = await user_client.post(
        f"/api/properties/{test_property.id}/visits",
        json={"visitDate": "next tuesday"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_schedule_visit_requires_login(client: AsyncClient, test_property: Property):
    response = await client.post(
        f"/api/properties/{test_property.id}/visits",
        json={"visitDate": _future()}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_schedule_visit_unknown_property(user_client: AsyncClient):
    response = await user_client.post(
        f"/api/properties/{uuid.uuid4()}/visits",
        json={"visitDate": _future()}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_my_visits(user_client: AsyncClient, test_user: User, test_property: Property):
    await VisitService.schedule_visit(test_user, test_property.id, datetime.now(timezone.utc) + timedelta(days=2))

    response = await user_client.get("/api/user/visits")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["property"]["id"] == str(test_property.id)


@pytest.mark.asyncio
async def test_naive_visit_date_is_utc(test_user: User, test_property: Property):
    now = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)

    with pytest.raises(InvalidVisitDate):
        await VisitService.schedule_visit(test_user, test_property.id, datetime(2030, 5, 1, 11, 0), now=now)

    visit = await VisitService.schedule_visit(test_user, test_property.id, datetime(2030, 5, 1, 13, 0), now=now)
    assert visit.visit_date.tzinfo is not None
