"""Vote on answer use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.common import VoteResponse, VoteType
from unihub.domain.service import AnswerService
from unihub.domain.value import AnswerId, DoubtId, UserId


class VoteAnswerRequest(BaseModel):
    """Vote on answer request."""

    doubt_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str | None  # User ID from authenticated user
    type: VoteType


class VoteAnswerUseCase:
    """Use case for upvoting or downvoting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize vote answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: VoteAnswerRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the doubt doesn't exist or the answer isn't on it
            UnauthenticatedError: If there is no user
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        outcome = await self.answer_service.vote_on_answer(
            DoubtId(UUID(request.doubt_id)),
            AnswerId(UUID(request.answer_id)),
            user_id,
            request.type.direction,
        )
        return VoteResponse.from_outcome(outcome)
