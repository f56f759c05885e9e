"""Journal entry model."""

import datetime

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base


class JournalEntry(Base):
    """Free-text journal entry, independent of categories."""

    __tablename__ = "journal"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    # JSON-encoded list of strings
    tags: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<JournalEntry(id={self.id}, date={self.date})>"
