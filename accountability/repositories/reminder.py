"""Reminder repository."""

from datetime import date, datetime

from sqlalchemy import and_, or_

from accountability.models.reminder import Reminder as ReminderModel
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.reminder import Reminder, ReminderBase, ReminderUpdate


class ReminderRepository(RecordRepository):
    """Dated to-dos, ordered by due date, due time, then id."""

    model = ReminderModel

    def _ordered(self, query):
        return query.order_by(
            ReminderModel.due_date.asc(),
            ReminderModel.due_time.asc(),
            ReminderModel.id.asc(),
        )

    @requires_storage(list)
    def all(self) -> list[Reminder]:
        with self.storage.session() as db:
            rows = self._ordered(db.query(ReminderModel)).all()
            return [Reminder.model_validate(row) for row in rows]

    @requires_storage()
    def get(self, reminder_id: int) -> Reminder | None:
        with self.storage.session() as db:
            row = db.get(ReminderModel, reminder_id)
            return Reminder.model_validate(row) if row else None

    @requires_storage()
    def create(
        self,
        title: str,
        due_date: date,
        due_time: str | None = None,
        description: str | None = None,
        category_id: int | None = None,
        activity_id: int | None = None,
    ) -> Reminder | None:
        """Insert an open reminder. ``due_time`` is HH:MM when given."""
        data = ReminderBase(
            title=title,
            description=description,
            due_date=due_date,
            due_time=due_time,
            category_id=category_id,
            activity_id=activity_id,
        )
        with self.storage.writing() as db:
            db_reminder = ReminderModel(**data.model_dump(), completed=False)
            db.add(db_reminder)
            db.flush()
            reminder = Reminder.model_validate(db_reminder)
        return reminder

    def update(self, reminder_id: int, patch: ReminderUpdate) -> bool:
        return super().update(reminder_id, patch)

    def mark_completed(self, reminder_id: int) -> bool:
        return self.update(reminder_id, ReminderUpdate(completed=True))

    @requires_storage(list)
    def pending(self) -> list[Reminder]:
        """Reminders not yet completed."""
        with self.storage.session() as db:
            query = db.query(ReminderModel).filter(ReminderModel.completed.is_(False))
            return [Reminder.model_validate(row) for row in self._ordered(query).all()]

    @requires_storage(list)
    def overdue(self, now: datetime | None = None) -> list[Reminder]:
        """Open reminders due before ``now`` (defaults to the clock).

        Due dates and times are local wall-clock values, so an aware ``now``
        is converted to local time and a naive one is taken as local already.

        A reminder due today counts only once its due time has passed; one due
        today without a time is not overdue until tomorrow.
        """
        now = (now or datetime.now()).astimezone()
        today = now.date()
        current_time = now.strftime("%H:%M")

        with self.storage.session() as db:
            query = db.query(ReminderModel).filter(
                ReminderModel.completed.is_(False),
                or_(
                    ReminderModel.due_date < today,
                    and_(
                        ReminderModel.due_date == today,
                        ReminderModel.due_time.is_not(None),
                        ReminderModel.due_time < current_time,
                    ),
                ),
            )
            return [Reminder.model_validate(row) for row in self._ordered(query).all()]
