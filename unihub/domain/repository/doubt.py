"""Doubt repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pydantic import BaseModel

from unihub.domain.model.doubt import Doubt
from unihub.domain.value import DoubtId


class DoubtFilter(BaseModel):
    """Conjunctive filter for doubt listings.

    Unset fields impose no constraint. search_text matches when a single
    field (title, content, subject or the joined tags) contains every
    whitespace-delimited token, case-insensitively.
    """

    semester: int | None = None
    subject: str | None = None
    solved: bool | None = None
    search_text: str | None = None

    @property
    def search_tokens(self) -> list[str]:
        return self.search_text.lower().split() if self.search_text else []


class DoubtRepository(ABC):
    """Repository for the Doubt aggregate.

    Defines the contract for doubt persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, doubt_id: DoubtId, for_update: bool = False
    ) -> Optional[Doubt]:
        """Find a doubt by ID.

        Args:
            doubt_id: The doubt's unique identifier
            for_update: Lock the doubt for the rest of the transaction so
                that mutations of the same aggregate serialize

        Returns:
            The doubt if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, doubt_ids: Sequence[DoubtId]) -> List[Doubt]:
        """Find several doubts at once (batch query).

        Args:
            doubt_ids: Doubt IDs to look up

        Returns:
            The doubts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        doubt_filter: DoubtFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Doubt]:
        """Find doubts matching a filter, newest first.

        Ordering is created_at DESC with id as tiebreaker so that pages are
        stable for a fixed filter.

        Args:
            doubt_filter: Conjunctive filter
            limit: Maximum number of doubts to return
            offset: Number of doubts to skip

        Returns:
            List of doubts matching the filter
        """
        pass

    @abstractmethod
    async def count(self, doubt_filter: DoubtFilter) -> int:
        """Count doubts matching a filter.

        Args:
            doubt_filter: Conjunctive filter

        Returns:
            Total number of matching doubts
        """
        pass

    @abstractmethod
    async def save(self, doubt: Doubt) -> Doubt:
        """Save a doubt (create or update).

        Args:
            doubt: The doubt to save

        Returns:
            The saved doubt
        """
        pass

    @abstractmethod
    async def delete(self, doubt_id: DoubtId) -> None:
        """Hard delete a doubt.

        Args:
            doubt_id: The doubt ID to delete
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, doubt_id: DoubtId, up_delta: int, down_delta: int
    ) -> Optional[Doubt]:
        """Atomically adjust the vote tally.

        Args:
            doubt_id: The doubt ID
            up_delta: Change to the upvote count
            down_delta: Change to the downvote count

        Returns:
            The updated doubt, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_answer_count(self, doubt_id: DoubtId) -> Optional[Doubt]:
        """Atomically increment the answer count by 1.

        Args:
            doubt_id: The doubt ID

        Returns:
            The updated doubt, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_solved(self, doubt_id: DoubtId, is_solved: bool) -> Optional[Doubt]:
        """Set the solved flag.

        Args:
            doubt_id: The doubt ID
            is_solved: New solved state

        Returns:
            The updated doubt, or None if it doesn't exist
        """
        pass
