from uuid import UUID
from datetime import datetime
from typing import Optional

from pydantic import Field, field_serializer

from homebid.schemas.base import CamelModel
from homebid.schemas.property import PropertySummary


class VisitCreate(CamelModel):
    visit_date: datetime
    phone: Optional[str] = Field(None, max_length=30)
    questions: Optional[str] = Field(None, max_length=2000)


class VisitResponse(CamelModel):
    id: UUID
    property_id: UUID
    user_id: UUID
    visit_date: datetime
    phone: Optional[str]
    questions: Optional[str]
    created_at: datetime

    @field_serializer("id", "property_id", "user_id")
    def serialize_uuid(self, v: UUID, _info):
        return str(v)


class UserVisitResponse(VisitResponse):
    property: PropertySummary
