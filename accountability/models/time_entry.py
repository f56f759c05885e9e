"""Time entry model."""

import datetime

from sqlalchemy import Date, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base
from accountability.models.types import ISOTimestamp


class TimeEntry(Base):
    """A timed span spent on an activity.

    An entry is active while ``end_time`` is null. ``duration_minutes`` is
    filled in when the entry is stopped.
    """

    __tablename__ = "time_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    activity_id: Mapped[int] = mapped_column(
        ForeignKey("activities.id", ondelete="CASCADE"), nullable=False
    )
    start_time: Mapped[datetime.datetime] = mapped_column(ISOTimestamp, nullable=False)
    end_time: Mapped[datetime.datetime | None] = mapped_column(ISOTimestamp, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_time_entries_activity_date", "activity_id", "date"),
        {"sqlite_autoincrement": True},
    )

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    def __repr__(self) -> str:
        return f"<TimeEntry(id={self.id}, activity_id={self.activity_id}, active={self.is_active})>"
