"""Streak schema."""

from pydantic import BaseModel, Field


class Streak(BaseModel):
    """Consecutive-day logging streaks for one category."""

    category_id: int
    current: int = Field(default=0, ge=0)
    best: int = Field(default=0, ge=0)
