"""Journal repository."""

import json
from datetime import date
from typing import Any

from pydantic import BaseModel

from accountability.models.journal import JournalEntry as JournalEntryModel
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.journal import JournalEntry, JournalEntryUpdate


class JournalRepository(RecordRepository):
    """Journal entries, newest first."""

    model = JournalEntryModel

    @requires_storage(list)
    def all(self) -> list[JournalEntry]:
        with self.storage.session() as db:
            rows = (
                db.query(JournalEntryModel)
                .order_by(JournalEntryModel.date.desc(), JournalEntryModel.id.desc())
                .all()
            )
            return [JournalEntry.model_validate(row) for row in rows]

    @requires_storage()
    def add(
        self, text: str, tags: list[str] | None = None, day: date | None = None
    ) -> JournalEntry | None:
        with self.storage.writing() as db:
            db_entry = JournalEntryModel(
                text=text,
                tags=json.dumps(tags or []),
                date=day or date.today(),
            )
            db.add(db_entry)
            db.flush()
            entry = JournalEntry.model_validate(db_entry)
        return entry

    create = add

    def _patch_values(self, patch: BaseModel) -> dict[str, Any]:
        values = super()._patch_values(patch)
        if values.get("tags") is not None:
            values["tags"] = json.dumps(values["tags"])
        return values

    def update(self, entry_id: int, patch: JournalEntryUpdate) -> bool:
        return super().update(entry_id, patch)

    @requires_storage(list)
    def recent(self, limit: int = 50) -> list[JournalEntry]:
        with self.storage.session() as db:
            rows = (
                db.query(JournalEntryModel)
                .order_by(JournalEntryModel.date.desc(), JournalEntryModel.id.desc())
                .limit(limit)
                .all()
            )
            return [JournalEntry.model_validate(row) for row in rows]

    @requires_storage(list)
    def search(self, query: str) -> list[JournalEntry]:
        """Entries whose text contains query, newest first."""
        with self.storage.session() as db:
            rows = (
                db.query(JournalEntryModel)
                .filter(JournalEntryModel.text.contains(query, autoescape=True))
                .order_by(JournalEntryModel.date.desc(), JournalEntryModel.id.desc())
                .all()
            )
            return [JournalEntry.model_validate(row) for row in rows]
