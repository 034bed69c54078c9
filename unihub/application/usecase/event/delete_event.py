"""Delete event use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.domain.service import EventService, UserService
from unihub.domain.value import EventId, UserId


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    event_id: str  # UUID string
    user_id: str  # Requester, must be the creator or faculty


class DeleteEventResponse(BaseModel):
    """Delete event response."""

    success: bool
    message: str


class DeleteEventUseCase:
    """Use case for deleting an event."""

    def __init__(self, event_service: EventService, user_service: UserService) -> None:
        """Initialize delete event use case.

        Args:
            event_service: Event domain service
            user_service: User domain service
        """
        self.event_service = event_service
        self.user_service = user_service

    async def execute(self, request: DeleteEventRequest) -> DeleteEventResponse:
        """Execute delete event flow.

        Raises:
            NotFoundError: If the event or the requester doesn't exist
            ForbiddenError: If the requester is neither the creator nor faculty
        """
        requester = await self.user_service.resolve_user(UserId(UUID(request.user_id)))
        await self.event_service.delete(EventId(UUID(request.event_id)), requester)
        return DeleteEventResponse(success=True, message="Event deleted successfully")
