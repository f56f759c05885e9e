"""Reminder model for dated to-dos."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base
from accountability.models.types import ISOTimestamp, utcnow


class Reminder(Base):
    """Reminder model for storing dated to-dos.

    A reminder is overdue when it is not completed and its due date has
    passed, or it is due today at a time that has already passed.
    """

    __tablename__ = "reminders"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    # HH:MM, 24-hour local time
    due_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, server_default="0")
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    activity_id: Mapped[int | None] = mapped_column(
        ForeignKey("activities.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(ISOTimestamp, nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_reminders_due", "due_date", "due_time"),
        Index("idx_reminders_completed", "completed"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Reminder(id={self.id}, title='{self.title}', completed={self.completed})>"
