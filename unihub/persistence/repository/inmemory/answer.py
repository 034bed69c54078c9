"""In-memory answer repository for testing."""

from typing import Optional

from unihub.domain.model import Answer
from unihub.domain.repository import AnswerRepository
from unihub.domain.value import AnswerId, DoubtId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_doubt(self, doubt_id: DoubtId) -> list[Answer]:
        """Find all answers of a doubt ordered by position."""
        answers = [a for a in self._answers.values() if a.doubt_id == doubt_id]
        return sorted(answers, key=lambda a: a.position)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def apply_vote_delta(
        self, answer_id: AnswerId, up_delta: int, down_delta: int
    ) -> Optional[Answer]:
        """Adjust the vote tally of an answer."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(
            update={
                "upvotes": answer.upvotes + up_delta,
                "downvotes": answer.downvotes + down_delta,
            }
        )
        self._answers[answer_id] = updated
        return updated

    async def delete_by_doubt(self, doubt_id: DoubtId) -> int:
        """Delete every answer of a doubt."""
        doomed = [i for i, a in self._answers.items() if a.doubt_id == doubt_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)
