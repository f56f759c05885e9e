"""Reminder schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

DUE_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReminderBase(BaseModel):
    """Base reminder schema."""

    title: str
    description: str | None = None
    due_date: date
    due_time: str | None = Field(default=None, pattern=DUE_TIME_PATTERN)
    category_id: int | None = None
    activity_id: int | None = None


class ReminderUpdate(BaseModel):
    """Partial update for a reminder."""

    title: str | None = None
    description: str | None = None
    due_date: date | None = None
    due_time: str | None = Field(default=None, pattern=DUE_TIME_PATTERN)
    completed: bool | None = None
    category_id: int | None = None
    activity_id: int | None = None


class Reminder(ReminderBase):
    """Schema for a stored reminder."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    completed: bool
    created_at: datetime
