"""Request/response schemas for categories."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="The name of the category")
    description: str | None = Field(default=None, description="A brief description of the category")


class CategoryUpdate(BaseModel):
    """Omitted fields are left unchanged; an explicit null description clears it."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
