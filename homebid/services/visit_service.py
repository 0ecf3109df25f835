from uuid import UUID
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from homebid.core.exceptions import InvalidVisitDate
from homebid.models.user import User
from homebid.models.visit import Visit
from homebid.services.property_service import PropertyService


class VisitService:
    @staticmethod
    async def schedule_visit(
        user: User,
        property_id: UUID,
        visit_date: datetime,
        phone: Optional[str] = None,
        questions: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> Visit:
        """Book a visit; naive visit dates are taken as UTC"""
        prop = await PropertyService.get_property(property_id)

        if visit_date.tzinfo is None:
            visit_date = visit_date.replace(tzinfo=timezone.utc)
        if visit_date <= (now or datetime.now(timezone.utc)):
            raise InvalidVisitDate()

        visit = await Visit.create(
            user=user,
            property=prop,
            visit_date=visit_date,
            phone=phone or None,
            questions=questions or None
        )
        logger.info(f"Visit {visit.id} scheduled on property {prop.id} for {visit_date.isoformat()}")
        return visit

    @staticmethod
    async def get_user_visits(user_id: UUID) -> List[Visit]:
        return await Visit.filter(user_id=user_id).order_by("-created_at").prefetch_related("property")
