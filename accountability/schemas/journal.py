"""Journal schemas."""

import json
import datetime

from pydantic import BaseModel, ConfigDict


class JournalEntryBase(BaseModel):
    """Base journal entry schema."""

    text: str
    date: datetime.date
    tags: str | None = None

    @property
    def tag_list(self) -> list[str]:
        """Decoded tags, empty when none were stored."""
        if not self.tags:
            return []
        return json.loads(self.tags)


class JournalEntryUpdate(BaseModel):
    """Partial update for a journal entry.

    ``tags`` takes the decoded list; it is JSON-encoded on write.
    """

    text: str | None = None
    date: datetime.date | None = None
    tags: list[str] | None = None


class JournalEntry(JournalEntryBase):
    """Schema for a stored journal entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
