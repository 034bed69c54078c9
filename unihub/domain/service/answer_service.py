"""Answer domain service."""

from uuid import uuid4

import logfire

from unihub.domain.error import NotFoundError, UnauthenticatedError
from unihub.domain.model.answer import ANSWER_MAX_LENGTH, Answer
from unihub.domain.model.doubt import Doubt
from unihub.domain.repository import AnswerRepository, DoubtRepository
from unihub.domain.value import (
    AnswerId,
    DoubtId,
    UserId,
    VotableType,
    VoteDirection,
    VoteOutcome,
)

from .base import Service
from .validation import require_text
from .vote_ledger import VoteLedger


class AnswerService(Service):
    """Domain service for the answers of a doubt.

    Answers are append-only. Every mutation locks the parent doubt first so
    that answer positions and answer tallies never race.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        doubt_repository: DoubtRepository,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            doubt_repository: Doubt repository (parent lookups and locking)
            vote_ledger: Vote ledger
        """
        self.answer_repository = answer_repository
        self.doubt_repository = doubt_repository
        self.vote_ledger = vote_ledger

    async def _lock_doubt(self, doubt_id: DoubtId) -> Doubt:
        doubt = await self.doubt_repository.find_by_id(doubt_id, for_update=True)
        if not doubt:
            logfire.warn("Doubt not found", doubt_id=str(doubt_id))
            raise NotFoundError("Doubt", str(doubt_id))
        return doubt

    async def add_answer(
        self, doubt_id: DoubtId, author_id: UserId | None, content: str
    ) -> Answer:
        """Append an answer to a doubt.

        Args:
            doubt_id: Parent doubt ID
            author_id: Answer author
            content: Answer text

        Returns:
            Created answer, positioned after every existing answer

        Raises:
            ValidationError: If content is blank or too long
            UnauthenticatedError: If there is no author
            NotFoundError: If the doubt doesn't exist
        """
        with logfire.span(
            "answer_service.add_answer", doubt_id=str(doubt_id), author_id=str(author_id)
        ):
            text = require_text("content", content, ANSWER_MAX_LENGTH)
            if author_id is None:
                raise UnauthenticatedError()

            await self._lock_doubt(doubt_id)

            # The count before the increment is the new answer's position
            doubt = await self.doubt_repository.increment_answer_count(doubt_id)
            if not doubt:
                raise NotFoundError("Doubt", str(doubt_id))

            answer = Answer(
                id=AnswerId(uuid4()),
                doubt_id=doubt_id,
                author_id=author_id,
                content=text,
                position=doubt.answer_count - 1,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer added",
                doubt_id=str(doubt_id),
                answer_id=str(saved.id),
                position=saved.position,
            )
            return saved

    async def list_answers(self, doubt_id: DoubtId) -> list[Answer]:
        """List the answers of a doubt in creation order.

        Raises:
            NotFoundError: If the doubt doesn't exist
        """
        with logfire.span("answer_service.list_answers", doubt_id=str(doubt_id)):
            doubt = await self.doubt_repository.find_by_id(doubt_id)
            if not doubt:
                raise NotFoundError("Doubt", str(doubt_id))

            answers = await self.answer_repository.find_by_doubt(doubt_id)
            return sorted(answers, key=lambda answer: answer.position)

    async def vote_on_answer(
        self,
        doubt_id: DoubtId,
        answer_id: AnswerId,
        voter_id: UserId | None,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Cast a vote on an answer.

        Args:
            doubt_id: Parent doubt ID
            answer_id: Answer ID
            voter_id: Voting user
            direction: Vote direction

        Returns:
            Answer tally and the voter's resulting vote

        Raises:
            NotFoundError: If the doubt doesn't exist or the answer isn't on it
            UnauthenticatedError: If there is no voter
        """
        with logfire.span(
            "answer_service.vote_on_answer",
            doubt_id=str(doubt_id),
            answer_id=str(answer_id),
            user_id=str(voter_id),
        ):
            await self._lock_doubt(doubt_id)

            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or answer.doubt_id != doubt_id:
                logfire.warn(
                    "Answer not found on doubt",
                    doubt_id=str(doubt_id),
                    answer_id=str(answer_id),
                )
                raise NotFoundError("Answer", str(answer_id))

            change = await self.vote_ledger.cast_vote(
                VotableType.ANSWER, answer_id, voter_id, direction
            )
            updated = await self.answer_repository.apply_vote_delta(
                answer_id, change.up_delta, change.down_delta
            )
            if not updated:
                raise NotFoundError("Answer", str(answer_id))

            return VoteOutcome(
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
                user_vote=change.user_vote,
            )

    async def remove_all(self, doubt_id: DoubtId) -> int:
        """Delete every answer of a doubt along with the votes on them.

        The caller must hold the doubt's lock.

        Returns:
            Number of answers deleted
        """
        with logfire.span("answer_service.remove_all", doubt_id=str(doubt_id)):
            answers = await self.answer_repository.find_by_doubt(doubt_id)
            await self.vote_ledger.clear(
                VotableType.ANSWER, [answer.id for answer in answers]
            )
            removed = await self.answer_repository.delete_by_doubt(doubt_id)
            logfire.info("Answers removed", doubt_id=str(doubt_id), removed=removed)
            return removed
