"""Request/response schemas for user accounts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bulletin.core.enums import UserRole


class UserCreate(BaseModel):
    """Registration payload. Role defaults to participant."""

    first_name: str = Field(..., min_length=1, max_length=100, description="User first name")
    last_name: str = Field(..., min_length=1, max_length=100, description="User last name")
    email: EmailStr = Field(..., max_length=150, description="User email address")
    password: str = Field(..., min_length=8, max_length=200, description="User password (min 8 characters)")
    role: UserRole = Field(default=UserRole.PARTICIPANT, description="User role")


class UserUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = Field(default=None, max_length=150)
    password: str | None = Field(default=None, min_length=8, max_length=200)
    role: UserRole | None = None


class UserResponse(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    role: UserRole
    created_at: datetime
