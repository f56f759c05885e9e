"""SQLAlchemy ORM models."""

from accountability.models.activity import Activity
from accountability.models.category import Category
from accountability.models.journal import JournalEntry
from accountability.models.log import Log
from accountability.models.reminder import Reminder
from accountability.models.setting import Setting
from accountability.models.time_entry import TimeEntry

__all__ = [
    "Activity",
    "Category",
    "JournalEntry",
    "Log",
    "Reminder",
    "Setting",
    "TimeEntry",
]
