"""Declarative base and schema initialization."""

import logging

from sqlalchemy import Engine, text
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet and enable foreign keys.

    Safe to call on every start. There is no migration step: existing tables
    are left exactly as they are.
    """
    # Register all tables on Base.metadata
    import accountability.models  # noqa: F401

    with engine.begin() as conn:
        conn.execute(text("PRAGMA foreign_keys = ON"))
        Base.metadata.create_all(bind=conn, checkfirst=True)

    logger.debug(f"Schema ready: {', '.join(sorted(Base.metadata.tables))}")
