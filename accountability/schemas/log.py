"""Log schemas."""

import datetime

from pydantic import BaseModel, ConfigDict


class LogBase(BaseModel):
    """Base log schema."""

    category_id: int
    rating: int
    note: str | None = None
    date: datetime.date


class LogUpdate(BaseModel):
    """Partial update for a log."""

    category_id: int | None = None
    rating: int | None = None
    note: str | None = None
    date: datetime.date | None = None


class Log(LogBase):
    """Schema for a stored log."""

    model_config = ConfigDict(from_attributes=True)

    id: int
