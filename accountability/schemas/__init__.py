"""Pydantic schemas for repository results and partial updates."""

from accountability.schemas.activity import Activity, ActivityUpdate
from accountability.schemas.backup import BackupDocument
from accountability.schemas.category import Category, CategoryUpdate
from accountability.schemas.health import CategoryAverage, Dashboard
from accountability.schemas.journal import JournalEntry, JournalEntryUpdate
from accountability.schemas.log import Log, LogUpdate
from accountability.schemas.reminder import Reminder, ReminderUpdate
from accountability.schemas.streak import Streak
from accountability.schemas.time_entry import TimeEntry, TimeEntryUpdate

__all__ = [
    "Activity",
    "ActivityUpdate",
    "BackupDocument",
    "Category",
    "CategoryAverage",
    "CategoryUpdate",
    "Dashboard",
    "JournalEntry",
    "JournalEntryUpdate",
    "Log",
    "LogUpdate",
    "Reminder",
    "ReminderUpdate",
    "Streak",
    "TimeEntry",
    "TimeEntryUpdate",
]
