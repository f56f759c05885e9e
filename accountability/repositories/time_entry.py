"""Time entry repository."""

import logging
import math
from datetime import date, datetime, timedelta

from accountability.models.time_entry import TimeEntry as TimeEntryModel
from accountability.models.types import as_utc, utcnow
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.time_entry import TimeEntry, TimeEntryUpdate

logger = logging.getLogger(__name__)


def elapsed_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two instants, halves rounded up."""
    return math.floor((end - start).total_seconds() / 60 + 0.5)


class TimeEntryRepository(RecordRepository):
    """Timed spans on activities.

    An entry opened with ``start`` stays active until ``stop`` is called on
    it. ``add`` records an entry that is already finished.

    ``now`` arguments may be aware or naive; a naive value is local time.
    Timestamps are stored in UTC.
    """

    model = TimeEntryModel

    @requires_storage(list)
    def all(self) -> list[TimeEntry]:
        with self.storage.session() as db:
            rows = (
                db.query(TimeEntryModel)
                .order_by(TimeEntryModel.date.desc(), TimeEntryModel.id.desc())
                .all()
            )
            return [TimeEntry.model_validate(row) for row in rows]

    @requires_storage()
    def get(self, entry_id: int) -> TimeEntry | None:
        with self.storage.session() as db:
            row = db.get(TimeEntryModel, entry_id)
            return TimeEntry.model_validate(row) if row else None

    @requires_storage()
    def start(
        self,
        activity_id: int,
        note: str | None = None,
        day: date | None = None,
        now: datetime | None = None,
    ) -> int | None:
        """Open an entry for the activity and return its id."""
        with self.storage.writing() as db:
            db_entry = TimeEntryModel(
                activity_id=activity_id,
                start_time=as_utc(now) if now else utcnow(),
                note=note,
                date=day or date.today(),
            )
            db.add(db_entry)
            db.flush()
            entry_id = db_entry.id
        return entry_id

    @requires_storage()
    def stop(
        self, entry_id: int, note: str | None = None, now: datetime | None = None
    ) -> TimeEntry | None:
        """Close an active entry and record its duration.

        Returns the stopped entry, or None when the entry does not exist or
        was already stopped. A stopped entry is never re-stamped. ``note``
        replaces the stored note when given.
        """
        end_time = as_utc(now) if now else utcnow()
        with self.storage.writing() as db:
            db_entry = db.get(TimeEntryModel, entry_id)
            if db_entry is None or db_entry.end_time is not None:
                logger.debug(f"Time entry {entry_id} is missing or already stopped")
                return None

            db_entry.end_time = end_time
            db_entry.duration_minutes = elapsed_minutes(db_entry.start_time, end_time)
            if note is not None:
                db_entry.note = note
            db.flush()
            entry = TimeEntry.model_validate(db_entry)
        return entry

    @requires_storage()
    def add(
        self,
        activity_id: int,
        minutes: int,
        note: str | None = None,
        day: date | None = None,
        now: datetime | None = None,
    ) -> TimeEntry | None:
        """Record a finished entry of ``minutes`` ending now."""
        end_time = as_utc(now) if now else utcnow()
        with self.storage.writing() as db:
            db_entry = TimeEntryModel(
                activity_id=activity_id,
                start_time=end_time - timedelta(minutes=minutes),
                end_time=end_time,
                duration_minutes=minutes,
                note=note,
                date=day or date.today(),
            )
            db.add(db_entry)
            db.flush()
            entry = TimeEntry.model_validate(db_entry)
        return entry

    def update(self, entry_id: int, patch: TimeEntryUpdate) -> bool:
        return super().update(entry_id, patch)

    @requires_storage(list)
    def active(self) -> list[TimeEntry]:
        """Entries still running, oldest first."""
        with self.storage.session() as db:
            rows = (
                db.query(TimeEntryModel)
                .filter(TimeEntryModel.end_time.is_(None))
                .order_by(TimeEntryModel.start_time.asc(), TimeEntryModel.id.asc())
                .all()
            )
            return [TimeEntry.model_validate(row) for row in rows]

    @requires_storage(list)
    def recent(self, limit: int = 50) -> list[TimeEntry]:
        with self.storage.session() as db:
            rows = (
                db.query(TimeEntryModel)
                .order_by(TimeEntryModel.date.desc(), TimeEntryModel.id.desc())
                .limit(limit)
                .all()
            )
            return [TimeEntry.model_validate(row) for row in rows]

    @requires_storage(list)
    def for_range(self, start: date, end: date) -> list[TimeEntry]:
        """Entries dated between start and end, both inclusive."""
        with self.storage.session() as db:
            rows = (
                db.query(TimeEntryModel)
                .filter(TimeEntryModel.date >= start, TimeEntryModel.date <= end)
                .order_by(TimeEntryModel.date.desc(), TimeEntryModel.id.desc())
                .all()
            )
            return [TimeEntry.model_validate(row) for row in rows]

    @requires_storage(list)
    def by_activity_since(self, activity_id: int, start: date) -> list[TimeEntry]:
        """Entries for one activity from start onwards, oldest first."""
        with self.storage.session() as db:
            rows = (
                db.query(TimeEntryModel)
                .filter(TimeEntryModel.activity_id == activity_id, TimeEntryModel.date >= start)
                .order_by(TimeEntryModel.start_time.asc(), TimeEntryModel.id.asc())
                .all()
            )
            return [TimeEntry.model_validate(row) for row in rows]
