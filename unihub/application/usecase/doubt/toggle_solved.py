"""Toggle solved use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.domain.service import DoubtService, UserService
from unihub.domain.value import DoubtId, UserId


class ToggleSolvedRequest(BaseModel):
    """Toggle solved request."""

    doubt_id: str  # UUID string
    user_id: str  # Requester, must be the asker


class ToggleSolvedResponse(BaseModel):
    """Toggle solved response."""

    doubt_id: str
    is_solved: bool


class ToggleSolvedUseCase:
    """Use case for marking a doubt solved or unsolved."""

    def __init__(self, doubt_service: DoubtService, user_service: UserService) -> None:
        """Initialize toggle solved use case.

        Args:
            doubt_service: Doubt domain service
            user_service: User domain service
        """
        self.doubt_service = doubt_service
        self.user_service = user_service

    async def execute(self, request: ToggleSolvedRequest) -> ToggleSolvedResponse:
        """Execute toggle solved flow.

        Raises:
            NotFoundError: If the doubt or the requester doesn't exist
            ForbiddenError: If the requester is not the asker
        """
        requester = await self.user_service.resolve_user(UserId(UUID(request.user_id)))
        is_solved = await self.doubt_service.toggle_solved(
            DoubtId(UUID(request.doubt_id)), requester
        )
        return ToggleSolvedResponse(doubt_id=request.doubt_id, is_solved=is_solved)
