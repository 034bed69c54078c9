"""Domain services."""

from .answer_service import AnswerService
from .authorization import Action, authorize, is_allowed
from .base import Service
from .doubt_service import DoubtPage, DoubtService
from .event_service import EventPage, EventService
from .jwt_service import JWTService
from .note_service import NotePage, NoteService
from .search_service import SearchService
from .user_service import UserService
from .vote_ledger import VoteLedger

__all__ = [
    "Action",
    "AnswerService",
    "DoubtPage",
    "DoubtService",
    "EventPage",
    "EventService",
    "JWTService",
    "NotePage",
    "NoteService",
    "SearchService",
    "Service",
    "UserService",
    "VoteLedger",
    "authorize",
    "is_allowed",
]
