"""List events use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from unihub.domain.repository import EventFilter
from unihub.domain.service import EventService, UserService

from .get_event import EventItem


class ListEventsRequest(BaseModel):
    """List events request."""

    upcoming: bool = False  # Only events dated from now on
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size


class ListEventsResponse(BaseModel):
    """List events response."""

    events: list[EventItem]
    total: int
    total_pages: int
    current_page: int


class ListEventsUseCase:
    """Use case for the event calendar, soonest first."""

    def __init__(self, event_service: EventService, user_service: UserService) -> None:
        """Initialize list events use case.

        Args:
            event_service: Event domain service
            user_service: User domain service
        """
        self.event_service = event_service
        self.user_service = user_service

    async def execute(self, request: ListEventsRequest) -> ListEventsResponse:
        """Execute list events flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "list_events.execute", upcoming=request.upcoming, page=request.page
        ):
            starts_from = datetime.now(timezone.utc) if request.upcoming else None
            result = await self.event_service.list_events(
                EventFilter(starts_from=starts_from),
                page=request.page,
                page_size=request.limit,
            )

            creators = await self.user_service.get_users(
                [event.created_by_id for event in result.events]
            )

            return ListEventsResponse(
                events=[
                    EventItem.from_event(event, creators.get(event.created_by_id))
                    for event in result.events
                ],
                total=result.total,
                total_pages=result.total_pages,
                current_page=result.page,
            )
