from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: reads ORM objects, speaks camelCase on the wire"""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def serialize_decimal(v: Optional[Decimal]) -> Optional[str]:
    # Fixed-point amounts travel as strings to avoid float rounding
    return str(v) if v is not None else None
