"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from unihub.domain.model.answer import Answer
from unihub.domain.value import AnswerId, DoubtId


class AnswerRepository(ABC):
    """Repository for answers embedded in a doubt.

    Answers are keyed by (doubt_id, answer_id) and indexed on doubt_id.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_doubt(self, doubt_id: DoubtId) -> List[Answer]:
        """Find all answers of a doubt in creation order.

        Args:
            doubt_id: The parent doubt ID

        Returns:
            Answers ordered by position
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, answer_id: AnswerId, up_delta: int, down_delta: int
    ) -> Optional[Answer]:
        """Atomically adjust the vote tally of an answer.

        Args:
            answer_id: The answer ID
            up_delta: Change to the upvote count
            down_delta: Change to the downvote count

        Returns:
            The updated answer, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_doubt(self, doubt_id: DoubtId) -> int:
        """Delete every answer of a doubt (cascade).

        Args:
            doubt_id: The parent doubt ID

        Returns:
            Number of answers deleted
        """
        pass
