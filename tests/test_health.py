"""Tests for the weighted health score."""

from datetime import date

from accountability.repositories import CategoryRepository, LogRepository
from accountability.schemas.category import Category
from accountability.schemas.log import Log
from accountability.services.health import HealthService, compute_health_score

TODAY = date(2026, 10, 19)


def make_log(log_id: int, category_id: int, rating: int, day: date = TODAY) -> Log:
    return Log(id=log_id, category_id=category_id, rating=rating, date=day)


class TestComputeHealthScore:
    """Tests for the score formula."""

    def test_no_categories(self):
        """Test that no categories score 0."""
        assert compute_health_score([], []) == 0

    def test_categories_without_logs(self):
        """Test that categories with no logs score 0."""
        categories = [Category(id=1, name="Patience", weight=1)]
        assert compute_health_score(categories, []) == 0

    def test_weighted_average(self):
        """Test weighting of per-category averages."""
        categories = [
            Category(id=1, name="Patience", weight=1),
            Category(id=2, name="Consistency", weight=3),
        ]
        logs = [make_log(1, 1, 7), make_log(2, 1, 9), make_log(3, 2, 10)]

        # (0.8 * 1 + 1.0 * 3) / 4
        assert compute_health_score(categories, logs) == 95

    def test_zero_total_weight(self):
        """Test that zero weights do not divide by zero."""
        categories = [Category(id=1, name="Patience", weight=0)]
        assert compute_health_score(categories, [make_log(1, 1, 10)]) == 0


def test_dashboard(storage):
    """Test dashboard figures over stored logs."""
    categories = CategoryRepository(storage)
    patience = categories.create("Patience")
    consistency = categories.create("Consistency")
    logs = LogRepository(storage)
    logs.add(patience.id, 6, day=TODAY)
    logs.add(patience.id, 9, day=date(2026, 10, 18))
    logs.add(consistency.id, 10, day=TODAY)

    dashboard = HealthService(storage).dashboard(today=TODAY)

    assert dashboard.health_score == 88
    assert dashboard.logs_today == 2
    assert dashboard.total_entries == 3
    averages = {a.name: a for a in dashboard.averages}
    assert averages["Patience"].average == 7.5
    assert averages["Patience"].count == 2
    assert averages["Consistency"].average == 10.0
