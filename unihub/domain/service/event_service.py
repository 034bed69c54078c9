"""Event domain service."""

from dataclasses import dataclass
from datetime import datetime
from math import ceil
from typing import Sequence
from uuid import uuid4

import logfire

from unihub.config import PaginationSettings
from unihub.domain.error import NotFoundError, ValidationError
from unihub.domain.model import Event, User
from unihub.domain.model.doubt import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from unihub.domain.repository import EventFilter, EventRepository
from unihub.domain.value import EventId, SearchKind

from .authorization import Action, authorize
from .base import Service
from .search_service import SearchService
from .validation import require_paging, require_text


@dataclass
class EventPage:
    """One page of an event listing."""

    events: list[Event]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.page_size)


class EventService(Service):
    """Domain service for college events. Only faculty create events."""

    def __init__(
        self,
        event_repository: EventRepository,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
            search_service: Search domain service
            pagination_settings: Pagination settings
        """
        self.event_repository = event_repository
        self.search_service = search_service
        self.pagination_settings = pagination_settings

    async def create(
        self,
        creator: User,
        title: str,
        description: str,
        date: datetime | None,
        location: str | None = None,
    ) -> Event:
        """Announce an event and index it.

        Raises:
            ForbiddenError: If the creator is not faculty
            ValidationError: Naming the first invalid field
        """
        with logfire.span("event_service.create", user_id=str(creator.id)):
            authorize(creator, Action.CREATE_EVENT, "event")

            title = require_text("title", title, TITLE_MAX_LENGTH)
            description = require_text("description", description, CONTENT_MAX_LENGTH)
            if date is None:
                raise ValidationError("date", "must not be empty")

            event = Event(
                id=EventId(uuid4()),
                title=title,
                description=description,
                date=date,
                location=location.strip() if location and location.strip() else None,
                created_by_id=creator.id,
            )
            saved = await self.event_repository.save(event)
            logfire.info("Event created", event_id=str(saved.id))

            await self.search_service.index(saved)
            return saved

    async def get(self, event_id: EventId) -> Event:
        """Get an event by ID.

        Raises:
            NotFoundError: If the event doesn't exist
        """
        with logfire.span("event_service.get", event_id=str(event_id)):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))
            return event

    async def get_many(self, event_ids: Sequence[EventId]) -> list[Event]:
        """Get several events in the given order, skipping missing ones."""
        if not event_ids:
            return []
        found = {e.id: e for e in await self.event_repository.find_by_ids(event_ids)}
        return [found[event_id] for event_id in event_ids if event_id in found]

    async def list_events(
        self, event_filter: EventFilter, page: int = 1, page_size: int | None = None
    ) -> EventPage:
        """List events matching a filter, soonest first.

        Raises:
            ValidationError: If page or page_size is out of range
        """
        page_size = require_paging(page, page_size, self.pagination_settings)

        with logfire.span(
            "event_service.list_events",
            starts_from=str(event_filter.starts_from),
            page=page,
            page_size=page_size,
        ):
            total = await self.event_repository.count(event_filter)
            events = await self.event_repository.find_all(
                event_filter, limit=page_size, offset=(page - 1) * page_size
            )
            logfire.info("Events listed", total=total, returned=len(events))
            return EventPage(events=events, total=total, page=page, page_size=page_size)

    async def delete(self, event_id: EventId, requester: User) -> None:
        """Delete an event and its search document.

        Raises:
            NotFoundError: If the event doesn't exist
            ForbiddenError: If the requester is neither the creator nor faculty
        """
        with logfire.span(
            "event_service.delete", event_id=str(event_id), user_id=str(requester.id)
        ):
            event = await self.get(event_id)
            authorize(
                requester,
                Action.DELETE_EVENT,
                "event",
                event_id,
                owner_id=event.created_by_id,
            )

            await self.event_repository.delete(event_id)
            logfire.info("Event deleted", event_id=str(event_id))

            await self.search_service.remove(SearchKind.EVENTS, event_id)
