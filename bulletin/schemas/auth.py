"""Request/response schemas for auth endpoints and the token identity."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bulletin.core.enums import UserRole


class Identity(BaseModel):
    """Authenticated subject reconstructed from a token (claims only, never stored)."""

    model_config = ConfigDict(frozen=True)

    subject_id: int
    email: str
    role: UserRole


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, max_length=200, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Seconds until the token expires")
