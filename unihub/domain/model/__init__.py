"""Domain model entities for UniHub."""

from unihub.domain.model.answer import Answer
from unihub.domain.model.doubt import Doubt
from unihub.domain.model.event import Event
from unihub.domain.model.note import Note
from unihub.domain.model.search import SearchDocument, SearchHit, SearchResults
from unihub.domain.model.user import User
from unihub.domain.model.vote import Vote

__all__ = [
    "User",
    "Doubt",
    "Answer",
    "Vote",
    "Note",
    "Event",
    "SearchDocument",
    "SearchHit",
    "SearchResults",
]
