"""Pydantic request/response schemas."""

from bulletin.schemas.auth import Identity, LoginRequest, TokenResponse
from bulletin.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from bulletin.schemas.health import HealthResponse
from bulletin.schemas.post import ModerationRequest, PostCreate, PostResponse
from bulletin.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "ModerationRequest",
    "PostCreate",
    "PostResponse",
    "TokenResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
