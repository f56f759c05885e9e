"""Activity schemas."""

from pydantic import BaseModel, ConfigDict


class ActivityBase(BaseModel):
    """Base activity schema."""

    name: str
    category_id: int | None = None
    description: str | None = None


class ActivityUpdate(BaseModel):
    """Partial update for an activity.

    Setting ``category_id`` to None explicitly unlinks the category.
    """

    name: str | None = None
    category_id: int | None = None
    description: str | None = None


class Activity(ActivityBase):
    """Schema for a stored activity."""

    model_config = ConfigDict(from_attributes=True)

    id: int
