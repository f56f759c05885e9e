"""Whole-database export and restore.

``export_all`` reads every table into a ``BackupDocument``. ``import_all``
replaces the entire contents of the store with a document, keeping the
original row ids.

On a backend with transactions the restore is all-or-nothing. On the
in-memory backend every statement is committed on its own: a failure part way
through leaves the store partially restored and the error is re-raised. That
state is not repaired.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from accountability.database import Base
from accountability.exceptions import BackupFormatError
from accountability.models import (
    Activity as ActivityModel,
    Category as CategoryModel,
    JournalEntry as JournalEntryModel,
    Log as LogModel,
    Reminder as ReminderModel,
    Setting as SettingModel,
    TimeEntry as TimeEntryModel,
)
from accountability.schemas.activity import Activity
from accountability.schemas.backup import BackupDocument, ReminderRecord
from accountability.schemas.category import Category
from accountability.schemas.journal import JournalEntry
from accountability.schemas.log import Log
from accountability.schemas.time_entry import TimeEntry
from accountability.storage import StorageHandle, get_storage

logger = logging.getLogger(__name__)

# Parents before children
TABLES = [
    ("categories", CategoryModel, Category),
    ("logs", LogModel, Log),
    ("journal", JournalEntryModel, JournalEntry),
    ("activities", ActivityModel, Activity),
    ("time_entries", TimeEntryModel, TimeEntry),
    ("reminders", ReminderModel, ReminderRecord),
]

DELETE_ORDER = [
    TimeEntryModel,
    ReminderModel,
    LogModel,
    ActivityModel,
    JournalEntryModel,
    CategoryModel,
    SettingModel,
]


class BackupService:
    """Exports and restores the full relational state."""

    def __init__(self, storage: StorageHandle | None = None) -> None:
        self.storage = storage or get_storage()

    def export_all(self) -> BackupDocument:
        """Read every table. An unavailable store exports as empty."""
        if not self.storage.available:
            logger.debug("Export skipped, storage unavailable")
            return BackupDocument(categories=[], logs=[], journal=[])

        data: dict[str, Any] = {}
        with self.storage.session() as db:
            for name, model, schema in TABLES:
                rows = db.query(model).order_by(model.id.asc()).all()
                data[name] = [schema.model_validate(row) for row in rows]
            data["settings"] = {row.key: row.value for row in db.query(SettingModel).all()}

        document = BackupDocument(**data)
        logger.info(
            f"Exported {len(document.categories)} categories, {len(document.logs)} logs, "
            f"{len(document.journal)} journal entries"
        )
        return document

    def _rows(self, document: BackupDocument) -> list[Base]:
        records: list[Base] = []
        for name, model, _ in TABLES:
            # Field values as held, before any export-only serializers
            records.extend(model(**dict(record)) for record in getattr(document, name))
        for key, value in document.settings.items():
            records.append(SettingModel(key=key, value=value))
        return records

    def import_all(self, document: BackupDocument | Mapping[str, Any]) -> bool:
        """Replace all stored rows with the document's rows.

        Returns False when the store is unavailable and nothing was done.
        Raises ``BackupFormatError`` before touching the store if the
        document is malformed. Insert failures propagate after the rollback
        (or, without transactions, with the store partially restored).
        """
        if not isinstance(document, BackupDocument):
            try:
                document = BackupDocument.model_validate(document)
            except ValidationError as e:
                raise BackupFormatError(f"Invalid backup document: {e}") from e

        if not self.storage.available:
            logger.debug("Import skipped, storage unavailable")
            return False

        records = self._rows(document)
        if self.storage.supports_transactions:
            self._restore_atomically(records)
        else:
            self._restore_sequentially(records)

        logger.info(f"Imported {len(records)} rows")
        return True

    def _restore_atomically(self, records: list[Base]) -> None:
        try:
            with self.storage.writing() as db:
                for model in DELETE_ORDER:
                    db.query(model).delete()
                for record in records:
                    db.add(record)
                    db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Import failed, previous data kept: {e}")
            raise

    def _restore_sequentially(self, records: list[Base]) -> None:
        try:
            for model in DELETE_ORDER:
                with self.storage.writing() as db:
                    db.query(model).delete()
            for record in records:
                with self.storage.writing() as db:
                    db.add(record)
        except SQLAlchemyError as e:
            logger.error(f"Import failed part way, store is partially restored: {e}")
            raise

    def export_to_file(self, path: Path) -> Path:
        """Write the export as indented JSON."""
        path = Path(path)
        document = self.export_all()
        path.write_text(json.dumps(document.model_dump(mode="json"), indent=2))
        logger.info(f"Wrote backup to {path}")
        return path

    def import_from_file(self, path: Path) -> bool:
        """Restore from a JSON file written by ``export_to_file``."""
        try:
            data = json.loads(Path(path).read_text())
        except json.JSONDecodeError as e:
            raise BackupFormatError(f"Backup file {path} is not valid JSON: {e}") from e
        return self.import_all(data)


def export_all(storage: StorageHandle | None = None) -> BackupDocument:
    return BackupService(storage).export_all()


def import_all(
    document: BackupDocument | Mapping[str, Any], storage: StorageHandle | None = None
) -> bool:
    return BackupService(storage).import_all(document)
