"""In-memory event repository for testing."""

from typing import Optional, Sequence

from unihub.domain.model import Event
from unihub.domain.repository import EventFilter, EventRepository
from unihub.domain.value import EventId


def _matches(event: Event, event_filter: EventFilter) -> bool:
    if event_filter.starts_from is None:
        return True
    # astimezone() reads naive values as local time, like the stored defaults
    return event.date.astimezone() >= event_filter.starts_from.astimezone()


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._events.get(event_id)

    async def find_by_ids(self, event_ids: Sequence[EventId]) -> list[Event]:
        """Find several events at once."""
        return [self._events[i] for i in event_ids if i in self._events]

    async def find_all(
        self, event_filter: EventFilter, limit: int = 10, offset: int = 0
    ) -> list[Event]:
        """Find events with filtering and pagination, soonest first."""
        events = [e for e in self._events.values() if _matches(e, event_filter)]
        events.sort(key=lambda e: (e.date.astimezone(), e.id))
        return events[offset : offset + limit]

    async def count(self, event_filter: EventFilter) -> int:
        """Count events matching the filter."""
        return sum(1 for e in self._events.values() if _matches(e, event_filter))

    async def save(self, event: Event) -> Event:
        """Save an event."""
        self._events[event.id] = event
        return event

    async def delete(self, event_id: EventId) -> None:
        """Hard delete an event."""
        self._events.pop(event_id, None)
