"""Settings repository."""

from sqlalchemy.dialects.sqlite import insert

from accountability.models.setting import Setting as SettingModel
from accountability.repositories.base import Repository, requires_storage


class SettingsRepository(Repository):
    """Key/value settings with upsert writes."""

    model = SettingModel

    @requires_storage()
    def get(self, key: str) -> str | None:
        with self.storage.session() as db:
            row = db.get(SettingModel, key)
            return row.value if row else None

    @requires_storage()
    def set(self, key: str, value: str) -> None:
        """Insert the key, or overwrite its value if it already exists."""
        stmt = insert(SettingModel).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SettingModel.key], set_={"value": stmt.excluded.value}
        )
        with self.storage.writing() as db:
            db.execute(stmt)

    @requires_storage(dict)
    def all(self) -> dict[str, str | None]:
        with self.storage.session() as db:
            return {row.key: row.value for row in db.query(SettingModel).all()}

    @requires_storage(bool)
    def remove(self, key: str) -> bool:
        with self.storage.writing() as db:
            count = db.query(SettingModel).filter(SettingModel.key == key).delete()
        return count > 0
