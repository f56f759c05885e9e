"""Setting model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base


class Setting(Base):
    """Key/value application setting."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Setting(key='{self.key}')>"
