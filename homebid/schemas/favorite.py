from uuid import UUID
from datetime import datetime

from pydantic import field_serializer

from homebid.schemas.base import CamelModel


class FavoriteResponse(CamelModel):
    id: UUID
    property_id: UUID
    user_id: UUID
    created_at: datetime

    @field_serializer("id", "property_id", "user_id")
    def serialize_uuid(self, v: UUID, _info):
        return str(v)
