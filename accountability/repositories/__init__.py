"""Repositories: the query and mutation surface over the storage handle."""

from accountability.repositories.activity import ActivityRepository
from accountability.repositories.category import CategoryRepository
from accountability.repositories.journal import JournalRepository
from accountability.repositories.log import LogRepository
from accountability.repositories.reminder import ReminderRepository
from accountability.repositories.setting import SettingsRepository
from accountability.repositories.time_entry import TimeEntryRepository

__all__ = [
    "ActivityRepository",
    "CategoryRepository",
    "JournalRepository",
    "LogRepository",
    "ReminderRepository",
    "SettingsRepository",
    "TimeEntryRepository",
]
