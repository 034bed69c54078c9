"""Domain value objects for UniHub."""

from unihub.domain.value.identifiers import (
    AnswerId,
    DoubtId,
    EventId,
    NoteId,
    UserId,
    VoteId,
)
from unihub.domain.value.types import (
    MAX_SEMESTER,
    MIN_SEMESTER,
    SearchKind,
    UserRole,
    VotableType,
    VoteChange,
    VoteDirection,
    VoteOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "DoubtId",
    "AnswerId",
    "NoteId",
    "EventId",
    "VoteId",
    # Types
    "MIN_SEMESTER",
    "MAX_SEMESTER",
    "SearchKind",
    "UserRole",
    "VotableType",
    "VoteChange",
    "VoteDirection",
    "VoteOutcome",
]
