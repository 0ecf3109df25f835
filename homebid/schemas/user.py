from uuid import UUID
from datetime import datetime

from pydantic import EmailStr, Field, field_serializer, field_validator

from homebid.schemas.base import CamelModel

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class RegisterRequest(LoginRequest):
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)


class UserResponse(CamelModel):
    id: UUID
    email: str
    first_name: str
    last_name: str
    created_at: datetime

    @field_serializer("id")
    def serialize_id(self, v: UUID, _info):
        return str(v)
