"""Enumerations and small immutable values shared across the UniHub domain."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

MIN_SEMESTER = 1
MAX_SEMESTER = 8


class ValueObject(BaseModel):
    """Immutable value compared by its fields."""

    model_config = ConfigDict(frozen=True)


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteDirection":
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    DOUBT = "doubt"
    ANSWER = "answer"
    NOTE = "note"


class UserRole(str, Enum):
    """Role assigned to a member by the identity provider."""

    STUDENT = "Student"
    FACULTY = "Faculty"


class SearchKind(str, Enum):
    """Searchable collections."""

    NOTES = "notes"
    DOUBTS = "doubts"
    EVENTS = "events"


class VoteChange(ValueObject):
    """Result of applying one vote call to a ledger.

    Carries the tally deltas the owning aggregate must apply and the
    voter's resulting vote (None when the call toggled the vote off).
    """

    up_delta: int = 0
    down_delta: int = 0
    user_vote: VoteDirection | None = None


class VoteOutcome(ValueObject):
    """Tally of a votable after a vote call, from the voter's point of view."""

    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None = None
