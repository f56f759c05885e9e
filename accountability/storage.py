"""Storage handles for the local relational store.

Two strategies sit behind the same ``StorageHandle`` interface:

- ``NativeStorage`` wraps a SQLite database file. Every committed statement is
  durable immediately.
- ``InMemoryStorage`` wraps an in-memory SQLite database whose full image is
  restored from a ``BlobStore`` on construction and written back after every
  committed write. Each write therefore costs O(database size). This is the
  known ceiling of the strategy and is acceptable for a single user's small
  local dataset.

If either strategy fails to open, ``open_storage`` returns an
``UnavailableStorage`` handle instead of raising. Repositories return empty
results against it and discard writes.
"""

import logging
import os
import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

import redis
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from accountability.config import Settings, get_settings
from accountability.database import init_db
from accountability.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite only enforces foreign keys when asked to, per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class BlobStore(ABC):
    """Key/value store holding serialized database images."""

    @abstractmethod
    def load(self, key: str) -> bytes | None:
        """Return the stored image, or None if nothing was saved under key."""

    @abstractmethod
    def save(self, key: str, data: bytes) -> None:
        """Overwrite the image stored under key."""


class FileBlobStore(BlobStore):
    """Blob store keeping one file per key in a local directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.sqlite"

    def load(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def save(self, key: str, data: bytes) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)


class RedisBlobStore(BlobStore):
    """Blob store backed by a Redis server."""

    def __init__(self, url: str) -> None:
        self.client = redis.Redis.from_url(url)
        # Fail at construction time so the caller can degrade
        self.client.ping()

    def load(self, key: str) -> bytes | None:
        return self.client.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.client.set(key, data)


class StorageHandle(ABC):
    """Process-wide access to the relational store."""

    available: bool = True
    supports_transactions: bool = True

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        event.listen(self.engine, "connect", _enable_foreign_keys)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session for reads. Nothing is committed."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def writing(self) -> Iterator[Session]:
        """Session whose work is committed and persisted on clean exit.

        An exception inside the block rolls the session back and propagates.
        """
        with self.session() as db:
            yield db
            db.commit()
        self.persist()

    def initialize(self) -> None:
        """Create the schema and persist the result."""
        init_db(self.engine)
        self.persist()

    @abstractmethod
    def persist(self) -> None:
        """Make committed writes durable."""


class NativeStorage(StorageHandle):
    """SQLite database file on local disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(create_engine(f"sqlite:///{self.path}"))
        # Surface a bad path now rather than on the first query
        with self.engine.connect():
            pass

    def persist(self) -> None:
        # Writes are durable once committed
        return None

    def __repr__(self) -> str:
        return f"<NativeStorage(path='{self.path}')>"


class InMemoryStorage(StorageHandle):
    """In-memory SQLite database mirrored to a blob store after every write.

    Writes are not grouped into multi-statement transactions on this backend,
    so ``supports_transactions`` is False.
    """

    supports_transactions = False

    def __init__(self, blob_store: BlobStore, key: str) -> None:
        self.blob_store = blob_store
        self.key = key
        super().__init__(
            create_engine(
                "sqlite://",
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        )

        image = self.blob_store.load(self.key)
        if image:
            self._restore(image)
            logger.info(f"Restored database image '{self.key}' ({len(image)} bytes)")
        else:
            logger.info(f"No saved image under '{self.key}', starting empty")

    def _restore(self, image: bytes) -> None:
        raw = self.engine.raw_connection()
        try:
            raw.driver_connection.deserialize(image)
        finally:
            raw.close()

    def serialize(self) -> bytes:
        """Return the full binary image of the in-memory database."""
        raw = self.engine.raw_connection()
        try:
            return raw.driver_connection.serialize()
        finally:
            raw.close()

    def persist(self) -> None:
        image = self.serialize()
        try:
            self.blob_store.save(self.key, image)
        except (OSError, redis.RedisError) as e:
            logger.error(f"Failed to save database image '{self.key}': {e}")

    def __repr__(self) -> str:
        return f"<InMemoryStorage(key='{self.key}')>"


class UnavailableStorage(StorageHandle):
    """No-op handle used when the real store could not be opened."""

    available = False
    supports_transactions = False

    def __init__(self, reason: str) -> None:
        self.engine = None
        self.reason = reason

    @contextmanager
    def session(self) -> Iterator[Session]:
        raise StorageUnavailableError(self.reason)
        yield  # pragma: no cover

    def initialize(self) -> None:
        return None

    def persist(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"<UnavailableStorage(reason='{self.reason}')>"


def _open_blob_store(settings: Settings) -> BlobStore:
    if settings.blob_store == "redis":
        return RedisBlobStore(settings.redis_url)
    return FileBlobStore(settings.blob_path)


def open_storage(settings: Settings) -> StorageHandle:
    """Open the configured store and make sure its schema exists.

    Never raises for an unusable store: logs the failure and returns an
    ``UnavailableStorage`` handle.
    """
    try:
        if settings.storage_backend == "memory":
            handle: StorageHandle = InMemoryStorage(_open_blob_store(settings), settings.blob_key)
        else:
            handle = NativeStorage(settings.database_path)
        handle.initialize()
    except (OSError, sqlite3.Error, SQLAlchemyError, redis.RedisError) as e:
        logger.error(f"Storage unavailable, continuing without persistence: {e}")
        return UnavailableStorage(str(e))

    logger.info(f"Opened storage {handle!r}")
    return handle


@lru_cache
def get_storage() -> StorageHandle:
    """Get the process-wide storage handle, opening it on first use."""
    return open_storage(get_settings())
