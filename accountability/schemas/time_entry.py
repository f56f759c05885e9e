"""Time entry schemas."""

import datetime

from pydantic import BaseModel, ConfigDict


class TimeEntryBase(BaseModel):
    """Base time entry schema."""

    activity_id: int
    start_time: datetime.datetime
    end_time: datetime.datetime | None = None
    duration_minutes: int | None = None
    note: str | None = None
    date: datetime.date


class TimeEntryUpdate(BaseModel):
    """Partial update for a time entry."""

    activity_id: int | None = None
    start_time: datetime.datetime | None = None
    end_time: datetime.datetime | None = None
    duration_minutes: int | None = None
    note: str | None = None
    date: datetime.date | None = None


class TimeEntry(TimeEntryBase):
    """Schema for a stored time entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int

    @property
    def is_active(self) -> bool:
        return self.end_time is None
