"""Process start-up: logging, storage, schema and default data."""

import logging

from accountability.config import get_settings
from accountability.services.seed import seed_defaults
from accountability.storage import StorageHandle, get_storage

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging at the given level or the configured one."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def bootstrap() -> StorageHandle:
    """Open storage (creating the schema) and seed defaults.

    Safe to call more than once per process.
    """
    configure_logging()
    storage = get_storage()
    if not storage.available:
        logger.warning("Running without storage; nothing will be saved")
    seed_defaults(storage)
    return storage
