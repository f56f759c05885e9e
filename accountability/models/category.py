"""Category model."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from accountability.database import Base


class Category(Base):
    """A rated area of behavior, weighted in the health score."""

    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    weight: Mapped[float] = mapped_column(Float, default=1.0, server_default="1")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
