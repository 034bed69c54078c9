"""Create event use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.domain.service import EventService, UserService
from unihub.domain.value import UserId

from .get_event import EventItem


class CreateEventRequest(BaseModel):
    """Create event request."""

    title: str
    description: str
    date: datetime
    location: str | None = None
    user_id: str  # Creator, must be faculty


class CreateEventResponse(EventItem):
    """Created event."""


class CreateEventUseCase:
    """Use case for announcing an event."""

    def __init__(self, event_service: EventService, user_service: UserService) -> None:
        """Initialize create event use case.

        Args:
            event_service: Event domain service
            user_service: User domain service
        """
        self.event_service = event_service
        self.user_service = user_service

    async def execute(self, request: CreateEventRequest) -> CreateEventResponse:
        """Execute create event flow.

        Raises:
            ForbiddenError: If the creator is not faculty
            ValidationError: Naming the first invalid field
        """
        with logfire.span("create_event.execute", user_id=request.user_id):
            creator = await self.user_service.resolve_user(
                UserId(UUID(request.user_id))
            )
            event = await self.event_service.create(
                creator,
                title=request.title,
                description=request.description,
                date=request.date,
                location=request.location,
            )
            return CreateEventResponse.from_event(event, creator)
