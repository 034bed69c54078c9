"""Vote on doubt use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.common import VoteResponse, VoteType
from unihub.domain.service import DoubtService
from unihub.domain.value import DoubtId, UserId


class VoteDoubtRequest(BaseModel):
    """Vote on doubt request."""

    doubt_id: str  # UUID string
    user_id: str | None  # User ID from authenticated user
    type: VoteType


class VoteDoubtUseCase:
    """Use case for upvoting or downvoting a doubt."""

    def __init__(self, doubt_service: DoubtService) -> None:
        """Initialize vote doubt use case.

        Args:
            doubt_service: Doubt domain service
        """
        self.doubt_service = doubt_service

    async def execute(self, request: VoteDoubtRequest) -> VoteResponse:
        """Execute vote flow.

        Repeating the same vote type removes the vote.

        Raises:
            NotFoundError: If the doubt doesn't exist
            UnauthenticatedError: If there is no user
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        outcome = await self.doubt_service.vote(
            DoubtId(UUID(request.doubt_id)), user_id, request.type.direction
        )
        return VoteResponse.from_outcome(outcome)
