"""Repository interfaces for UniHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from unihub.domain.repository.answer import AnswerRepository
from unihub.domain.repository.doubt import DoubtFilter, DoubtRepository
from unihub.domain.repository.event import EventFilter, EventRepository
from unihub.domain.repository.note import NoteFilter, NoteRepository
from unihub.domain.repository.search import SearchRepository
from unihub.domain.repository.user import UserRepository
from unihub.domain.repository.vote import VoteRepository

__all__ = [
    "AnswerRepository",
    "DoubtFilter",
    "DoubtRepository",
    "EventFilter",
    "EventRepository",
    "NoteFilter",
    "NoteRepository",
    "SearchRepository",
    "UserRepository",
    "VoteRepository",
]
