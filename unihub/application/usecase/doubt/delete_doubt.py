"""Delete doubt use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.domain.service import DoubtService, UserService
from unihub.domain.value import DoubtId, UserId


class DeleteDoubtRequest(BaseModel):
    """Delete doubt request."""

    doubt_id: str  # UUID string
    user_id: str  # Requester, must be the asker or faculty


class DeleteDoubtResponse(BaseModel):
    """Delete doubt response."""

    success: bool
    message: str


class DeleteDoubtUseCase:
    """Use case for deleting a doubt with everything it owns."""

    def __init__(self, doubt_service: DoubtService, user_service: UserService) -> None:
        """Initialize delete doubt use case.

        Args:
            doubt_service: Doubt domain service
            user_service: User domain service
        """
        self.doubt_service = doubt_service
        self.user_service = user_service

    async def execute(self, request: DeleteDoubtRequest) -> DeleteDoubtResponse:
        """Execute delete doubt flow.

        Raises:
            NotFoundError: If the doubt or the requester doesn't exist
            ForbiddenError: If the requester is neither the asker nor faculty
        """
        requester = await self.user_service.resolve_user(UserId(UUID(request.user_id)))
        await self.doubt_service.delete(DoubtId(UUID(request.doubt_id)), requester)
        return DeleteDoubtResponse(success=True, message="Doubt deleted successfully")
