"""Category schemas."""

from pydantic import BaseModel, ConfigDict


class CategoryBase(BaseModel):
    """Base category schema."""

    name: str
    weight: float = 1.0


class CategoryUpdate(BaseModel):
    """Partial update for a category. Only fields that are set are written."""

    name: str | None = None
    weight: float | None = None


class Category(CategoryBase):
    """Schema for a stored category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
