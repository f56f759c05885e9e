"""Default data for a fresh database."""

import logging

from accountability.config import AppConfig, get_app_config
from accountability.repositories.activity import ActivityRepository
from accountability.repositories.category import CategoryRepository
from accountability.storage import StorageHandle

logger = logging.getLogger(__name__)


def seed_defaults(
    storage: StorageHandle | None = None, config: AppConfig | None = None
) -> dict[str, int]:
    """Insert default categories and activities into empty tables.

    Each table is checked on its own; a table that already has rows is
    never reseeded. Returns how many rows were inserted per table.
    """
    config = config or get_app_config()
    categories = CategoryRepository(storage)
    activities = ActivityRepository(storage)
    seeded = {"categories": 0, "activities": 0}

    if categories.count() == 0:
        for name in config.categories:
            if categories.create(name, weight=1.0) is not None:
                seeded["categories"] += 1

    if activities.count() == 0:
        for name in config.activities:
            if activities.create(name) is not None:
                seeded["activities"] += 1

    if any(seeded.values()):
        logger.info(
            f"Seeded {seeded['categories']} categories and {seeded['activities']} activities"
        )
    return seeded
