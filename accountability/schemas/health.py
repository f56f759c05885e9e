"""Dashboard schemas."""

from pydantic import BaseModel


class CategoryAverage(BaseModel):
    """Average rating of one category over the dashboard window."""

    category_id: int
    name: str
    average: float
    count: int


class Dashboard(BaseModel):
    """Weighted health score and supporting figures."""

    health_score: int
    averages: list[CategoryAverage]
    logs_today: int
    total_entries: int
