"""Response models shared by several use cases."""

from enum import Enum

from pydantic import BaseModel

from unihub.domain.model import User
from unihub.domain.value import UserRole, VoteDirection, VoteOutcome


class VoteType(str, Enum):
    """Vote type as sent by clients."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def direction(self) -> VoteDirection:
        return VoteDirection.UP if self is VoteType.UPVOTE else VoteDirection.DOWN


class AuthorInfo(BaseModel):
    """Resolved author reference."""

    user_id: str
    name: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User | None) -> "AuthorInfo | None":
        if user is None:
            return None
        return cls(user_id=str(user.id), name=user.name, role=user.role)


class VoteResponse(BaseModel):
    """Tally after a vote and the caller's resulting vote."""

    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None

    @classmethod
    def from_outcome(cls, outcome: VoteOutcome) -> "VoteResponse":
        return cls(
            upvotes=outcome.upvotes,
            downvotes=outcome.downvotes,
            user_vote=outcome.user_vote,
        )
