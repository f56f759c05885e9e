"""Tests for whole-database export and import."""

import json
from datetime import date, datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from accountability.exceptions import BackupFormatError
from accountability.repositories import (
    ActivityRepository,
    CategoryRepository,
    JournalRepository,
    LogRepository,
    ReminderRepository,
    SettingsRepository,
    TimeEntryRepository,
)
from accountability.services.backup import BackupService, export_all, import_all

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def populate(storage) -> None:
    category = CategoryRepository(storage).create("Follow-through", weight=2)
    CategoryRepository(storage).create("Patience")
    LogRepository(storage).add(category.id, 8, "kept promise", day=date(2026, 10, 18))
    LogRepository(storage).add(category.id, 6, day=date(2026, 10, 19))
    JournalRepository(storage).add("Good talk", ["family"], day=date(2026, 10, 19))
    activity = ActivityRepository(storage).create("Household", category_id=category.id)
    entries = TimeEntryRepository(storage)
    entries.add(activity.id, 30, "dishes", day=date(2026, 10, 19), now=NOW)
    entries.start(activity.id, now=NOW)
    reminders = ReminderRepository(storage)
    done = reminders.create("Take out bins", date(2026, 10, 18), due_time="07:00")
    reminders.mark_completed(done.id)
    reminders.create("Call back", date(2026, 10, 20), activity_id=activity.id)
    SettingsRepository(storage).set("theme", "dark")


def test_export_contains_every_table(storage):
    """Test the shape of an exported document."""
    populate(storage)

    document = export_all(storage)

    assert len(document.categories) == 2
    assert len(document.logs) == 2
    assert len(document.journal) == 1
    assert len(document.activities) == 1
    assert len(document.time_entries) == 2
    assert len(document.reminders) == 2
    assert document.settings == {"theme": "dark"}


def test_export_json_format(storage):
    """Test JSON encoding of dates, timestamps and flags."""
    populate(storage)

    data = export_all(storage).model_dump(mode="json")

    assert data["logs"][0]["date"] == "2026-10-18"
    assert data["reminders"][0]["completed"] == 1
    assert data["reminders"][1]["completed"] == 0
    assert data["reminders"][0]["due_time"] == "07:00"
    assert datetime.fromisoformat(data["time_entries"][0]["start_time"]) == datetime(
        2026, 10, 19, 8, 30, tzinfo=timezone.utc
    )
    assert data["time_entries"][1]["end_time"] is None
    json.dumps(data)


def test_round_trip(storage):
    """Test that importing an export reproduces the same rows."""
    populate(storage)
    before = export_all(storage)

    assert import_all(before.model_dump(mode="json"), storage) is True

    assert export_all(storage) == before


def test_import_restores_reminder_flags(storage):
    """Test that exported 0/1 flags come back as booleans."""
    populate(storage)
    data = export_all(storage).model_dump(mode="json")

    import_all(data, storage)

    assert [r.completed for r in ReminderRepository(storage).all()] == [True, False]
    assert [r.title for r in ReminderRepository(storage).pending()] == ["Call back"]


def test_import_replaces_existing_rows(storage):
    """Test that rows not in the document are gone after import."""
    populate(storage)
    document = export_all(storage)
    CategoryRepository(storage).create("Only here")
    SettingsRepository(storage).set("locale", "en")

    import_all(document, storage)

    assert [c.name for c in CategoryRepository(storage).all()] == [
        "Follow-through",
        "Patience",
    ]
    assert SettingsRepository(storage).all() == {"theme": "dark"}
    assert export_all(storage) == document


def test_import_into_other_backend(native_storage, memory_storage):
    """Test restoring a native export into the in-memory backend."""
    populate(native_storage)
    CategoryRepository(memory_storage).create("Only here")
    document = export_all(native_storage)

    import_all(document, memory_storage)

    assert export_all(memory_storage) == document


def test_import_keeps_ids(storage):
    """Test that original ids are preserved."""
    document = {
        "categories": [{"id": 7, "name": "Patience", "weight": 1}],
        "logs": [{"id": 42, "category_id": 7, "rating": 9, "note": None, "date": "2026-10-19"}],
        "journal": [],
    }

    import_all(document, storage)

    assert CategoryRepository(storage).get(7).name == "Patience"
    assert LogRepository(storage).all()[0].id == 42


def test_import_older_document_without_new_tables(storage):
    """Test documents lacking activities, time entries, reminders and settings."""
    populate(storage)

    import_all({"categories": [], "logs": [], "journal": []}, storage)

    assert ActivityRepository(storage).all() == []
    assert ReminderRepository(storage).all() == []
    assert SettingsRepository(storage).all() == {}


def test_invalid_document(storage):
    """Test that a malformed document is rejected before any change."""
    populate(storage)

    with pytest.raises(BackupFormatError):
        import_all({"categories": "nope"}, storage)

    assert len(CategoryRepository(storage).all()) == 2


BAD_DOCUMENT = {
    "categories": [{"id": 1, "name": "Restored", "weight": 1}],
    "logs": [{"id": 1, "category_id": 999, "rating": 5, "note": None, "date": "2026-10-19"}],
    "journal": [],
}


def test_failed_import_rolls_back(native_storage):
    """Test that a transactional import failure leaves prior data intact."""
    populate(native_storage)
    before = export_all(native_storage)

    with pytest.raises(IntegrityError):
        import_all(BAD_DOCUMENT, native_storage)

    assert export_all(native_storage) == before


def test_failed_import_without_transactions_is_partial(memory_storage):
    """Test that the in-memory backend is left partially restored."""
    populate(memory_storage)

    with pytest.raises(IntegrityError):
        import_all(BAD_DOCUMENT, memory_storage)

    assert [c.name for c in CategoryRepository(memory_storage).all()] == ["Restored"]
    assert LogRepository(memory_storage).all() == []


def test_file_round_trip(storage, tmp_path):
    """Test writing a backup file and restoring it."""
    populate(storage)
    service = BackupService(storage)
    before = service.export_all()

    path = service.export_to_file(tmp_path / "accountability_export.json")
    SettingsRepository(storage).set("theme", "light")
    service.import_from_file(path)

    assert service.export_all() == before


def test_import_from_invalid_file(storage, tmp_path):
    """Test a backup file that is not JSON."""
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(BackupFormatError):
        BackupService(storage).import_from_file(path)
