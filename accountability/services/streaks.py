"""Streak computation.

A streak is a run of consecutive calendar days with at least one log for a
category. The current streak must reach today or yesterday to count.
"""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from accountability.repositories.category import CategoryRepository
from accountability.repositories.log import LogRepository
from accountability.schemas.streak import Streak
from accountability.storage import StorageHandle

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def streak_for(dates: Iterable[date], today: date) -> tuple[int, int]:
    """Return ``(current, best)`` for a category's log dates.

    ``current`` is the run of consecutive days ending today or yesterday,
    0 if the latest log is older than that. ``best`` is the longest run
    anywhere in the history, never less than ``current``. Several logs on
    one day count once.
    """
    days = sorted(set(dates), reverse=True)

    current = 0
    cursor = today
    for day in days:
        if current == 0:
            if day == today or cursor - day == ONE_DAY:
                current = 1
                cursor = day
            else:
                break
        elif cursor - day == ONE_DAY:
            current += 1
            cursor = day
        else:
            break

    best = 0
    run = 0
    previous = None
    for day in days:
        run = run + 1 if previous is not None and previous - day == ONE_DAY else 1
        best = max(best, run)
        previous = day

    return current, max(best, current)


class StreakService:
    """Computes streaks for every category from the logs table."""

    def __init__(self, storage: StorageHandle | None = None) -> None:
        self.categories = CategoryRepository(storage)
        self.logs = LogRepository(storage)

    def for_category(self, category_id: int, today: date | None = None) -> Streak:
        today = today or date.today()
        dates = [log.date for log in self.logs.by_category(category_id)]
        current, best = streak_for(dates, today)
        return Streak(category_id=category_id, current=current, best=best)

    def compute(self, today: date | None = None) -> list[Streak]:
        """Streaks for all categories, in category name order."""
        today = today or date.today()
        streaks = [self.for_category(category.id, today) for category in self.categories.all()]
        logger.debug(f"Computed streaks for {len(streaks)} categories")
        return streaks


def compute_streaks(storage: StorageHandle | None = None, today: date | None = None) -> list[Streak]:
    """Streaks for every category."""
    return StreakService(storage).compute(today)
