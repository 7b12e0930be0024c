"""Pydantic schemas for stored Category state."""

from uuid import UUID

from pydantic import AwareDatetime, BaseModel, Field


class CategorySnapshot(BaseModel):
    """Immutable copy of a category as held by a repository."""

    id: UUID
    name: str = Field(..., description="Category name")
    description: str = Field(..., description="Category description")
    is_active: bool = Field(True, description="Whether the category is active")
    created_at: AwareDatetime

    model_config = {"from_attributes": True, "frozen": True}
