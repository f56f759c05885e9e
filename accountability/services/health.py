"""Weighted health score for the dashboard."""

import math
from collections import defaultdict
from collections.abc import Sequence
from datetime import date

from accountability.repositories.category import CategoryRepository
from accountability.repositories.log import LogRepository
from accountability.schemas.category import Category
from accountability.schemas.health import CategoryAverage, Dashboard
from accountability.schemas.log import Log
from accountability.storage import StorageHandle


def _ratings_by_category(logs: Sequence[Log]) -> dict[int, list[int]]:
    ratings: dict[int, list[int]] = defaultdict(list)
    for log in logs:
        ratings[log.category_id].append(log.rating)
    return ratings


def compute_health_score(categories: Sequence[Category], logs: Sequence[Log]) -> int:
    """Score from 0 to 100.

    Each category contributes its average rating out of 10, scaled by its
    weight. Categories without logs contribute 0.
    """
    if not categories:
        return 0

    total_weight = sum(category.weight for category in categories) or 1
    ratings = _ratings_by_category(logs)

    weighted = 0.0
    for category in categories:
        values = ratings.get(category.id, [])
        average = sum(values) / len(values) if values else 0
        weighted += (average / 10) * category.weight

    return math.floor(weighted / total_weight * 100 + 0.5)


class HealthService:
    """Builds the dashboard figures from recent logs."""

    def __init__(self, storage: StorageHandle | None = None) -> None:
        self.categories = CategoryRepository(storage)
        self.logs = LogRepository(storage)

    def dashboard(self, limit: int = 50, today: date | None = None) -> Dashboard:
        today = today or date.today()
        categories = self.categories.all()
        logs = self.logs.recent(limit)
        ratings = _ratings_by_category(logs)

        averages = []
        for category in categories:
            values = ratings.get(category.id, [])
            averages.append(
                CategoryAverage(
                    category_id=category.id,
                    name=category.name,
                    average=round(sum(values) / len(values), 1) if values else 0.0,
                    count=len(values),
                )
            )

        return Dashboard(
            health_score=compute_health_score(categories, logs),
            averages=averages,
            logs_today=sum(1 for log in logs if log.date == today),
            total_entries=len(logs),
        )
