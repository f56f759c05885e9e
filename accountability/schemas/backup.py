"""Backup document schemas."""

from pydantic import BaseModel, Field, field_serializer

from accountability.schemas.activity import Activity
from accountability.schemas.category import Category
from accountability.schemas.journal import JournalEntry
from accountability.schemas.log import Log
from accountability.schemas.reminder import Reminder
from accountability.schemas.time_entry import TimeEntry


class ReminderRecord(Reminder):
    """Reminder row as written to a backup, with ``completed`` as 0/1."""

    @field_serializer("completed")
    def serialize_completed(self, completed: bool) -> int:
        return 1 if completed else 0


class BackupDocument(BaseModel):
    """Full export of every table.

    ``activities``, ``time_entries``, ``reminders`` and ``settings`` may be
    missing from documents written before those tables existed.
    """

    categories: list[Category]
    logs: list[Log]
    journal: list[JournalEntry]
    activities: list[Activity] = Field(default_factory=list)
    time_entries: list[TimeEntry] = Field(default_factory=list)
    reminders: list[ReminderRecord] = Field(default_factory=list)
    settings: dict[str, str | None] = Field(default_factory=dict)
