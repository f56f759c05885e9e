"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from accountability.config import get_app_config, get_settings
from accountability.storage import (
    BlobStore,
    InMemoryStorage,
    NativeStorage,
    StorageHandle,
    get_storage,
)


class DictBlobStore(BlobStore):
    """Blob store kept in a dict, counting saves."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.saves = 0

    def load(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.blobs[key] = data
        self.saves += 1


@pytest.fixture(autouse=True)
def clear_cached_singletons() -> Generator[None, None, None]:
    """Reset lru_cache'd settings and storage around every test."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    get_storage.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    get_storage.cache_clear()


@pytest.fixture
def native_storage(tmp_path) -> Generator[NativeStorage, None, None]:
    """File-backed store in a temporary directory."""
    storage = NativeStorage(tmp_path / "test.db")
    storage.initialize()
    yield storage
    storage.engine.dispose()


@pytest.fixture
def blob_store() -> DictBlobStore:
    return DictBlobStore()


@pytest.fixture
def memory_storage(blob_store: DictBlobStore) -> Generator[InMemoryStorage, None, None]:
    """In-memory store mirrored to a dict blob store."""
    storage = InMemoryStorage(blob_store, "test_db")
    storage.initialize()
    yield storage
    storage.engine.dispose()


@pytest.fixture(params=["native", "memory"])
def storage(request) -> StorageHandle:
    """Run the test against both storage strategies."""
    return request.getfixturevalue(f"{request.param}_storage")
