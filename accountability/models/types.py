"""Column types shared by the models."""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class ISOTimestamp(TypeDecorator):
    """Timezone-aware datetime stored as an ISO-8601 string in UTC.

    SQLite has no native timestamp type. Keeping the text ISO-8601 makes the
    stored value identical to the value written into backup documents.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: datetime | str | None, dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="microseconds")

    def process_result_value(self, value: str | None, dialect) -> datetime | None:
        if value is None:
            return None
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Aware UTC copy of a clock reading. A naive value is local time."""
    return value.astimezone(timezone.utc)
