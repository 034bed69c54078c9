"""College event routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from unihub.application.usecase.auth import GetCurrentUserUseCase
from unihub.application.usecase.event import (
    CreateEventRequest,
    CreateEventResponse,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventResponse,
    DeleteEventUseCase,
    GetEventRequest,
    GetEventResponse,
    GetEventUseCase,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
)
from unihub.interface.api.identity import require_user

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


class CreateEventAPIRequest(BaseModel):
    """API request for announcing an event."""

    title: str
    description: str = ""
    date: datetime
    location: str | None = None


@router.get("", response_model=ListEventsResponse)
async def list_events(
    list_events_use_case: FromDishka[ListEventsUseCase],
    upcoming: bool = False,
    page: int = 1,
    limit: int | None = None,
) -> ListEventsResponse:
    """List events by date, soonest first. ``upcoming`` hides past events."""
    return await list_events_use_case.execute(
        ListEventsRequest(upcoming=upcoming, page=page, limit=limit)
    )


@router.post("", response_model=CreateEventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventAPIRequest,
    create_event_use_case: FromDishka[CreateEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateEventResponse:
    """Announce an event. Faculty only."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await create_event_use_case.execute(
        CreateEventRequest(
            title=request.title,
            description=request.description,
            date=request.date,
            location=request.location,
            user_id=user.user_id,
        )
    )


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: UUID,
    get_event_use_case: FromDishka[GetEventUseCase],
) -> GetEventResponse:
    """Get an event."""
    return await get_event_use_case.execute(GetEventRequest(event_id=str(event_id)))


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: UUID,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteEventResponse:
    """Delete an event. Only the creator or faculty may delete."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await delete_event_use_case.execute(
        DeleteEventRequest(event_id=str(event_id), user_id=user.user_id)
    )
