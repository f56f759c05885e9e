"""Log repository."""

from datetime import date

from accountability.models.log import Log as LogModel
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.log import Log, LogUpdate


class LogRepository(RecordRepository):
    """Daily category ratings.

    Listings are newest first (date, then id, descending) unless noted.
    """

    model = LogModel

    @requires_storage(list)
    def all(self) -> list[Log]:
        with self.storage.session() as db:
            rows = db.query(LogModel).order_by(LogModel.date.desc(), LogModel.id.desc()).all()
            return [Log.model_validate(row) for row in rows]

    @requires_storage()
    def add(
        self, category_id: int, rating: int, note: str | None = None, day: date | None = None
    ) -> Log | None:
        """Record a rating for a category, on today unless ``day`` is given.

        The rating range is not checked here. A missing category raises
        ``IntegrityError`` from the foreign key.
        """
        with self.storage.writing() as db:
            db_log = LogModel(
                category_id=category_id,
                rating=rating,
                note=note,
                date=day or date.today(),
            )
            db.add(db_log)
            db.flush()
            log = Log.model_validate(db_log)
        return log

    create = add

    def update(self, log_id: int, patch: LogUpdate) -> bool:
        return super().update(log_id, patch)

    @requires_storage(list)
    def for_range(self, start: date, end: date) -> list[Log]:
        """Logs dated between start and end, both inclusive."""
        with self.storage.session() as db:
            rows = (
                db.query(LogModel)
                .filter(LogModel.date >= start, LogModel.date <= end)
                .order_by(LogModel.date.desc(), LogModel.id.desc())
                .all()
            )
            return [Log.model_validate(row) for row in rows]

    @requires_storage(list)
    def recent(self, limit: int = 50) -> list[Log]:
        with self.storage.session() as db:
            rows = (
                db.query(LogModel)
                .order_by(LogModel.date.desc(), LogModel.id.desc())
                .limit(limit)
                .all()
            )
            return [Log.model_validate(row) for row in rows]

    @requires_storage(list)
    def by_category_since(self, category_id: int, start: date) -> list[Log]:
        """Logs for one category from start onwards, oldest first."""
        with self.storage.session() as db:
            rows = (
                db.query(LogModel)
                .filter(LogModel.category_id == category_id, LogModel.date >= start)
                .order_by(LogModel.date.asc(), LogModel.id.asc())
                .all()
            )
            return [Log.model_validate(row) for row in rows]

    @requires_storage(list)
    def by_category(self, category_id: int) -> list[Log]:
        """Every log for one category, newest first."""
        with self.storage.session() as db:
            rows = (
                db.query(LogModel)
                .filter(LogModel.category_id == category_id)
                .order_by(LogModel.date.desc(), LogModel.id.desc())
                .all()
            )
            return [Log.model_validate(row) for row in rows]
