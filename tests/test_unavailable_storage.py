"""Tests for the no-op handle used when storage cannot be opened."""

from datetime import date

import pytest

from accountability.repositories import (
    ActivityRepository,
    CategoryRepository,
    JournalRepository,
    LogRepository,
    ReminderRepository,
    SettingsRepository,
    TimeEntryRepository,
)
from accountability.schemas.category import CategoryUpdate
from accountability.services.backup import BackupService
from accountability.services.health import HealthService
from accountability.services.seed import seed_defaults
from accountability.services.streaks import compute_streaks
from accountability.storage import UnavailableStorage


@pytest.fixture
def unavailable():
    return UnavailableStorage("test")


def test_reads_are_empty(unavailable):
    """Test that every listing comes back empty."""
    assert CategoryRepository(unavailable).all() == []
    assert LogRepository(unavailable).for_range(date(2026, 1, 1), date(2026, 12, 31)) == []
    assert JournalRepository(unavailable).recent() == []
    assert ActivityRepository(unavailable).all() == []
    assert TimeEntryRepository(unavailable).active() == []
    assert ReminderRepository(unavailable).overdue() == []
    assert SettingsRepository(unavailable).all() == {}
    assert CategoryRepository(unavailable).count() == 0


def test_writes_are_discarded(unavailable):
    """Test that writes report that nothing happened."""
    categories = CategoryRepository(unavailable)

    assert categories.create("Patience") is None
    assert categories.update(1, CategoryUpdate(name="x")) is False
    assert categories.remove(1) is False
    assert TimeEntryRepository(unavailable).start(1) is None
    assert TimeEntryRepository(unavailable).stop(1) is None
    assert SettingsRepository(unavailable).set("theme", "dark") is None
    assert SettingsRepository(unavailable).get("theme") is None
    assert categories.all() == []


def test_services_degrade(unavailable):
    """Test derived metrics and backup against the no-op handle."""
    assert compute_streaks(unavailable) == []
    assert seed_defaults(unavailable) == {"categories": 0, "activities": 0}
    assert HealthService(unavailable).dashboard().health_score == 0

    service = BackupService(unavailable)
    document = service.export_all()
    assert document.categories == []
    assert document.settings == {}
    assert service.import_all(document) is False
