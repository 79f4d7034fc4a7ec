"""Request/response schemas for posts and moderation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bulletin.core.enums import MODERATION_DECISIONS, PostStatus


class PostCreate(BaseModel):
    """New post; status is always assigned by the server (pending)."""

    title: str = Field(..., min_length=1, max_length=100, description="The title of the post")
    body: str = Field(..., min_length=1, description="The main content of the post")
    category_id: int = Field(..., gt=0, description="The category this post belongs to")


class ModerationRequest(BaseModel):
    """Admin decision on a pending post."""

    status: PostStatus = Field(..., description='Must be "approved" or "rejected"')

    @field_validator("status")
    @classmethod
    def validate_decision(cls, v: PostStatus) -> PostStatus:
        if v not in MODERATION_DECISIONS:
            raise ValueError('Invalid status. Must be "approved" or "rejected".')
        return v


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str


class CategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PostResponse(BaseModel):
    """Post with its author (null once the author's account is deleted) and category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    status: PostStatus
    created_at: datetime
    updated_at: datetime
    author: AuthorSummary | None = None
    category: CategorySummary
