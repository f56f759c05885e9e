"""Shared repository plumbing."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from pydantic import BaseModel

from accountability.database import Base
from accountability.storage import StorageHandle, get_storage

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def requires_storage(empty: Callable[[], Any] | None = None) -> Callable[[F], F]:
    """Return ``empty()`` (or None) instead of running when storage is unavailable.

    This is the visible "nothing happened" outcome of the no-op handle: list
    queries give ``[]``, lookups give None, writes give None or False.
    """

    def decorator(method: F) -> F:
        @wraps(method)
        def wrapper(self: "Repository", *args: Any, **kwargs: Any) -> Any:
            if not self.storage.available:
                logger.debug(f"{method.__qualname__} skipped, storage unavailable")
                return empty() if empty is not None else None
            return method(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


class Repository:
    """Base class for per-table repositories.

    Repositories keep no state of their own; every call goes to the storage
    handle.
    """

    model: type[Base]

    def __init__(self, storage: StorageHandle | None = None) -> None:
        self.storage = storage or get_storage()

    @requires_storage(int)
    def count(self) -> int:
        with self.storage.session() as db:
            return db.query(self.model).count()


class RecordRepository(Repository):
    """Repository for a table keyed by an integer ``id``."""

    def _patch_values(self, patch: BaseModel) -> dict[str, Any]:
        """Fields explicitly set on the patch, ready to write."""
        return patch.model_dump(exclude_unset=True)

    @requires_storage(bool)
    def update(self, record_id: int, patch: BaseModel) -> bool:
        """Apply a partial update. Returns True if a row was changed.

        A patch with no fields set is a no-op.
        """
        values = self._patch_values(patch)
        if not values:
            return False

        with self.storage.writing() as db:
            count = db.query(self.model).filter(self.model.id == record_id).update(values)
        return count > 0

    @requires_storage(bool)
    def remove(self, record_id: int) -> bool:
        """Delete a row by id. Foreign-key policies apply to dependent rows."""
        with self.storage.writing() as db:
            count = db.query(self.model).filter(self.model.id == record_id).delete()
        return count > 0

