"""Base class for audit events."""

from datetime import UTC, datetime
from typing import NewType
from uuid import UUID

from pydantic import Field

from articat.domain.shared.model.value import ValueObject

EventId = NewType("EventId", UUID)


def utc_now() -> datetime:
    return datetime.now(UTC)


class Event(ValueObject):
    """An immutable entry of an append-only log.

    ``sequence`` is the 1-based position assigned by the log on append and is
    the authoritative ordering; ``timestamp`` never decreases along it but two
    neighbouring entries may share one.
    """

    id: EventId
    sequence: int = Field(ge=1)
    timestamp: datetime = Field(default_factory=utc_now)

    def sort_key(self) -> tuple[datetime, int]:
        """Newest-last ordering: by timestamp, ties broken by log position."""
        return (self.timestamp, self.sequence)
