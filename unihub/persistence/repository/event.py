"""PostgreSQL implementation of Event repository."""

from typing import List, Optional, Sequence

from sqlalchemy import asc, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from unihub.domain.model import Event
from unihub.domain.repository import EventFilter, EventRepository
from unihub.domain.value import EventId
from unihub.persistence.mappers import event_to_dict, row_to_event
from unihub.persistence.tables import events_table


def _filter_clauses(event_filter: EventFilter) -> list:
    if event_filter.starts_from is None:
        return []
    return [events_table.c.date >= event_filter.starts_from]


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def find_by_ids(self, event_ids: Sequence[EventId]) -> List[Event]:
        """Find several events at once."""
        if not event_ids:
            return []

        stmt = select(events_table).where(events_table.c.id.in_(event_ids))
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def find_all(
        self, event_filter: EventFilter, limit: int = 10, offset: int = 0
    ) -> List[Event]:
        """Find events with filtering and pagination, soonest first."""
        stmt = (
            select(events_table)
            .where(*_filter_clauses(event_filter))
            .order_by(asc(events_table.c.date), asc(events_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def count(self, event_filter: EventFilter) -> int:
        """Count events matching the filter."""
        stmt = (
            select(func.count())
            .select_from(events_table)
            .where(*_filter_clauses(event_filter))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        values = event_to_dict(event)
        existing = await self.find_by_id(event.id)
        if existing:
            stmt = (
                update(events_table).where(events_table.c.id == event.id).values(**values)
            )
        else:
            stmt = events_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return event

    async def delete(self, event_id: EventId) -> None:
        """Hard delete an event."""
        stmt = delete(events_table).where(events_table.c.id == event_id)
        await self.session.execute(stmt)
        await self.session.flush()
