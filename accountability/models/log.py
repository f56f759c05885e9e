"""Log model."""

import datetime

from sqlalchemy import Date, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base


class Log(Base):
    """A daily rating for one category.

    Several logs for the same category on the same day are allowed.
    """

    __tablename__ = "logs"

    id: Mapped[int] = mapped_column(primary_key=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"), nullable=False
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_logs_category_date", "category_id", "date"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Log(id={self.id}, category_id={self.category_id}, date={self.date})>"
