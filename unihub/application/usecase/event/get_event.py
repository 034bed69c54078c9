"""Get event use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.common import AuthorInfo
from unihub.domain.model import Event, User
from unihub.domain.service import EventService, UserService
from unihub.domain.value import EventId


class EventItem(BaseModel):
    """Event in responses."""

    event_id: str
    title: str
    description: str
    date: datetime
    location: str | None
    created_by_id: str
    created_by: AuthorInfo | None
    created_at: datetime

    @classmethod
    def from_event(cls, event: Event, creator: User | None):
        return cls(
            event_id=str(event.id),
            title=event.title,
            description=event.description,
            date=event.date,
            location=event.location,
            created_by_id=str(event.created_by_id),
            created_by=AuthorInfo.from_user(creator),
            created_at=event.created_at,
        )


class GetEventRequest(BaseModel):
    """Get event request."""

    event_id: str  # UUID string


class GetEventResponse(EventItem):
    """Event details."""


class GetEventUseCase:
    """Use case for retrieving an event."""

    def __init__(self, event_service: EventService, user_service: UserService) -> None:
        """Initialize get event use case.

        Args:
            event_service: Event domain service
            user_service: User domain service
        """
        self.event_service = event_service
        self.user_service = user_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        """Execute get event flow.

        Raises:
            NotFoundError: If the event doesn't exist
        """
        event = await self.event_service.get(EventId(UUID(request.event_id)))
        creators = await self.user_service.get_users([event.created_by_id])
        return GetEventResponse.from_event(event, creators.get(event.created_by_id))
