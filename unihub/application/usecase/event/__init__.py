"""Event use cases."""

from .create_event import CreateEventRequest, CreateEventResponse, CreateEventUseCase
from .delete_event import DeleteEventRequest, DeleteEventResponse, DeleteEventUseCase
from .get_event import EventItem, GetEventRequest, GetEventResponse, GetEventUseCase
from .list_events import ListEventsRequest, ListEventsResponse, ListEventsUseCase

__all__ = [
    "CreateEventRequest",
    "CreateEventResponse",
    "CreateEventUseCase",
    "DeleteEventRequest",
    "DeleteEventResponse",
    "DeleteEventUseCase",
    "EventItem",
    "GetEventRequest",
    "GetEventResponse",
    "GetEventUseCase",
    "ListEventsRequest",
    "ListEventsResponse",
    "ListEventsUseCase",
]
