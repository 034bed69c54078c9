"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .doubt import InMemoryDoubtRepository
from .event import InMemoryEventRepository
from .note import InMemoryNoteRepository
from .search import InMemorySearchRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDoubtRepository",
    "InMemoryEventRepository",
    "InMemoryNoteRepository",
    "InMemorySearchRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
