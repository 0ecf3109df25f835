from fastapi import APIRouter, Depends, status
from uuid import UUID

from homebid.api.dependencies import get_current_user, http_error
from homebid.core.exceptions import HomeBidError
from homebid.models.user import User
from homebid.schemas.visit import VisitCreate, VisitResponse
from homebid.services.visit_service import VisitService

router = APIRouter()


@router.post("/{property_id}/visits", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def schedule_visit(
    property_id: UUID,
    visit_in: VisitCreate,
    user: User = Depends(get_current_user)
):
    """
    Schedules a visit to a property.

    Raises:
        HTTPException:
            400: visit date is not in the future.
            401: not logged in.
            404: property not found.
    """
    try:
        return await VisitService.schedule_visit(
            user=user,
            property_id=property_id,
            visit_date=visit_in.visit_date,
            phone=visit_in.phone,
            questions=visit_in.questions
        )
    except HomeBidError as e:
        raise http_error(e)
