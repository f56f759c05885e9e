"""Tests for the journal repository."""

from datetime import date

from accountability.repositories import JournalRepository
from accountability.schemas.journal import JournalEntryUpdate


def test_add_entry_with_tags(storage):
    """Test that tags are stored as an encoded list."""
    entry = JournalRepository(storage).add("Kept my word", ["trust", "work"], day=date(2026, 10, 19))

    assert entry.text == "Kept my word"
    assert entry.tag_list == ["trust", "work"]
    assert entry.date == date(2026, 10, 19)


def test_add_entry_without_tags(storage):
    """Test the default empty tag list."""
    entry = JournalRepository(storage).add("Quiet day")

    assert entry.tag_list == []
    assert entry.date == date.today()


def test_recent(storage):
    """Test recent entries, newest first."""
    repo = JournalRepository(storage)
    repo.add("one", day=date(2026, 10, 17))
    repo.add("two", day=date(2026, 10, 19))
    repo.add("three", day=date(2026, 10, 18))

    assert [e.text for e in repo.recent(limit=2)] == ["two", "three"]


def test_search(storage):
    """Test substring search over entry text."""
    repo = JournalRepository(storage)
    repo.add("Was patient at dinner", day=date(2026, 10, 18))
    repo.add("Missed the meeting", day=date(2026, 10, 19))
    repo.add("100% patient today", day=date(2026, 10, 19))

    assert [e.text for e in repo.search("patient")] == [
        "100% patient today",
        "Was patient at dinner",
    ]
    assert [e.text for e in repo.search("100%")] == ["100% patient today"]


def test_update_tags(storage):
    """Test replacing tags through a patch."""
    repo = JournalRepository(storage)
    entry = repo.add("Entry", ["old"])

    repo.update(entry.id, JournalEntryUpdate(tags=["new", "tags"]))

    updated = repo.all()[0]
    assert updated.tag_list == ["new", "tags"]
    assert updated.text == "Entry"


def test_remove_entry(storage):
    """Test deleting an entry."""
    repo = JournalRepository(storage)
    entry = repo.add("Entry")

    repo.remove(entry.id)

    assert repo.all() == []
