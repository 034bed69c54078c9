"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from unihub.domain.model import Vote
from unihub.domain.repository import VoteRepository
from unihub.domain.value import UserId, VotableType, VoteDirection, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        for vote in self._votes:
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_id
            ):
                return vote
        return None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items."""
        wanted = set(votable_ids)
        return [
            v
            for v in self._votes
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        duplicate = any(
            v.user_id == vote.user_id
            and v.votable_type == vote.votable_type
            and v.votable_id == vote.votable_id
            for v in self._votes
        )
        if duplicate:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_direction(self, vote_id: VoteId, direction: VoteDirection) -> None:
        """Replace the direction of a vote."""
        self._votes = [
            v.model_copy(update={"direction": direction}) if v.id == vote_id else v
            for v in self._votes
        ]

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items."""
        doomed = set(votable_ids)
        kept = [
            v
            for v in self._votes
            if not (v.votable_type == votable_type and v.votable_id in doomed)
        ]
        removed = len(self._votes) - len(kept)
        self._votes = kept
        return removed
