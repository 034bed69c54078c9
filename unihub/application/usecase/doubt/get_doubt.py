"""Get doubt use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.answer.list_answers import AnswerItem
from unihub.domain.service import AnswerService, DoubtService, UserService, VoteLedger
from unihub.domain.value import DoubtId, UserId, VotableType

from .list_doubts import DoubtItem


class GetDoubtRequest(BaseModel):
    """Get doubt request."""

    doubt_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetDoubtResponse(DoubtItem):
    """Doubt with its answers in creation order."""

    answers: list[AnswerItem]


class GetDoubtUseCase:
    """Use case for retrieving a doubt with its answers."""

    def __init__(
        self,
        doubt_service: DoubtService,
        answer_service: AnswerService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize get doubt use case.

        Args:
            doubt_service: Doubt domain service
            answer_service: Answer domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.doubt_service = doubt_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetDoubtRequest) -> GetDoubtResponse:
        """Execute get doubt flow.

        Args:
            request: Get doubt request with doubt ID and optional user ID

        Returns:
            Doubt details with answers, tallies and the caller's own votes

        Raises:
            NotFoundError: If the doubt doesn't exist
        """
        doubt_id = DoubtId(UUID(request.doubt_id))
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        doubt = await self.doubt_service.get(doubt_id)
        answers = await self.answer_service.list_answers(doubt_id)

        authors = await self.user_service.get_users(
            [doubt.asked_by_id] + [answer.author_id for answer in answers]
        )
        doubt_votes = await self.vote_ledger.votes_of(
            VotableType.DOUBT, [doubt.id], user_id
        )
        answer_votes = await self.vote_ledger.votes_of(
            VotableType.ANSWER, [answer.id for answer in answers], user_id
        )

        return GetDoubtResponse.from_doubt(
            doubt,
            authors.get(doubt.asked_by_id),
            doubt_votes.get(doubt.id),
            answers=[
                AnswerItem.from_answer(
                    answer, authors.get(answer.author_id), answer_votes.get(answer.id)
                )
                for answer in answers
            ],
        )
