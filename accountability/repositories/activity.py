"""Activity repository."""

from accountability.models.activity import Activity as ActivityModel
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.activity import Activity, ActivityUpdate


class ActivityRepository(RecordRepository):
    """Activities, ordered by name."""

    model = ActivityModel

    @requires_storage(list)
    def all(self) -> list[Activity]:
        with self.storage.session() as db:
            rows = db.query(ActivityModel).order_by(ActivityModel.name.asc()).all()
            return [Activity.model_validate(row) for row in rows]

    @requires_storage()
    def get(self, activity_id: int) -> Activity | None:
        with self.storage.session() as db:
            row = db.get(ActivityModel, activity_id)
            return Activity.model_validate(row) if row else None

    @requires_storage()
    def create(
        self, name: str, category_id: int | None = None, description: str | None = None
    ) -> Activity | None:
        with self.storage.writing() as db:
            db_activity = ActivityModel(name=name, category_id=category_id, description=description)
            db.add(db_activity)
            db.flush()
            activity = Activity.model_validate(db_activity)
        return activity

    def update(self, activity_id: int, patch: ActivityUpdate) -> bool:
        return super().update(activity_id, patch)
