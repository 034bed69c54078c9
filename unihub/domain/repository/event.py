"""Event repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from pydantic import BaseModel

from unihub.domain.model.event import Event
from unihub.domain.value import EventId


class EventFilter(BaseModel):
    """Filter for event listings.

    starts_from keeps only events dated at or after that instant.
    """

    starts_from: datetime | None = None


class EventRepository(ABC):
    """Repository for events."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, event_ids: Sequence[EventId]) -> List[Event]:
        """Find several events at once (batch query)."""
        pass

    @abstractmethod
    async def find_all(
        self, event_filter: EventFilter, limit: int = 10, offset: int = 0
    ) -> List[Event]:
        """Find events matching a filter, soonest first.

        Returns:
            Events ordered by date, then id
        """
        pass

    @abstractmethod
    async def count(self, event_filter: EventFilter) -> int:
        """Count events matching a filter."""
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> None:
        """Hard delete an event."""
        pass
