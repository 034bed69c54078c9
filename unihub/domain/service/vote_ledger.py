"""Vote ledger domain service."""

from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from unihub.domain.error import ConflictError, UnauthenticatedError
from unihub.domain.model.vote import Vote
from unihub.domain.repository import VoteRepository
from unihub.domain.value import (
    UserId,
    VotableType,
    VoteChange,
    VoteDirection,
    VoteId,
)

from .base import Service


def _delta(direction: VoteDirection, amount: int) -> dict[str, int]:
    if direction is VoteDirection.UP:
        return {"up_delta": amount}
    return {"down_delta": amount}


class VoteLedger(Service):
    """At-most-one-vote-per-voter ledger shared by doubts, answers and notes.

    The ledger only records votes. The owner of the votable (doubt, answer
    or note) applies the returned deltas to its stored tally, so tallies are
    maintained incrementally and never recounted on read.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        voter_id: UserId | None,
        direction: VoteDirection,
    ) -> VoteChange:
        """Apply one vote click.

        - no prior vote: the vote is created
        - prior vote in the same direction: the vote is removed
        - prior vote in the opposite direction: the vote is replaced

        The caller must hold the lock of the aggregate owning the votable and
        must have checked that the votable exists.

        Args:
            votable_type: Type of item voted on
            votable_id: ID of the item
            voter_id: Voting user (None when unauthenticated)
            direction: Direction of the click

        Returns:
            Tally deltas and the voter's resulting vote

        Raises:
            UnauthenticatedError: If there is no voter
            ConflictError: If a concurrent vote by the same voter won the race
        """
        if voter_id is None:
            raise UnauthenticatedError()

        with logfire.span(
            "vote_ledger.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(voter_id),
            direction=direction.value,
        ):
            existing = await self.vote_repository.find_by_user_and_votable(
                voter_id, votable_type, votable_id
            )

            if existing is None:
                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=voter_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    direction=direction,
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Concurrent duplicate vote",
                        user_id=str(voter_id),
                        votable_id=str(votable_id),
                    )
                    raise ConflictError(votable_type.value, str(votable_id))

                logfire.info("Vote cast", user_id=str(voter_id))
                return VoteChange(**_delta(direction, 1), user_vote=direction)

            if existing.direction == direction:
                # Same direction again toggles the vote off
                await self.vote_repository.delete(existing.id)
                logfire.info("Vote removed", user_id=str(voter_id))
                return VoteChange(**_delta(direction, -1), user_vote=None)

            await self.vote_repository.update_direction(existing.id, direction)
            logfire.info("Vote switched", user_id=str(voter_id))
            return VoteChange(
                **_delta(direction, 1),
                **_delta(existing.direction, -1),
                user_vote=direction,
            )

    async def votes_of(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
        voter_id: UserId | None,
    ) -> dict[UUID, VoteDirection]:
        """Get the directions a voter holds on several items.

        Args:
            votable_type: Type of items
            votable_ids: IDs of the items
            voter_id: The voter (None yields no votes)

        Returns:
            Mapping of votable ID to direction, for voted items only
        """
        if voter_id is None or not votable_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_votables(
            voter_id, votable_type, votable_ids
        )
        return {vote.votable_id: vote.direction for vote in votes}

    async def clear(self, votable_type: VotableType, votable_ids: Sequence[UUID]) -> int:
        """Drop every vote on the given items (used by cascade deletes).

        Returns:
            Number of votes removed
        """
        if not votable_ids:
            return 0

        with logfire.span(
            "vote_ledger.clear", votable_type=votable_type.value, count=len(votable_ids)
        ):
            removed = await self.vote_repository.delete_by_votables(
                votable_type, votable_ids
            )
            logfire.info("Votes cleared", removed=removed)
            return removed
