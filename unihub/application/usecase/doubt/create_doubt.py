"""Create doubt use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.domain.service import DoubtService, UserService
from unihub.domain.value import UserId

from .list_doubts import DoubtItem


class CreateDoubtRequest(BaseModel):
    """Create doubt request."""

    title: str
    content: str
    subject: str
    semester: int
    tags: list[str] = []
    user_id: str  # Asker, from authenticated user


class CreateDoubtResponse(DoubtItem):
    """Created doubt."""


class CreateDoubtUseCase:
    """Use case for asking a doubt."""

    def __init__(self, doubt_service: DoubtService, user_service: UserService) -> None:
        """Initialize create doubt use case.

        Args:
            doubt_service: Doubt domain service
            user_service: User domain service
        """
        self.doubt_service = doubt_service
        self.user_service = user_service

    async def execute(self, request: CreateDoubtRequest) -> CreateDoubtResponse:
        """Execute create doubt flow.

        Args:
            request: Create doubt request

        Returns:
            Created doubt

        Raises:
            ValidationError: Naming the first invalid field
            NotFoundError: If the asker is unknown
        """
        with logfire.span("create_doubt.execute", user_id=request.user_id):
            asker = await self.user_service.resolve_user(UserId(UUID(request.user_id)))

            doubt = await self.doubt_service.create(
                title=request.title,
                content=request.content,
                subject=request.subject,
                semester=request.semester,
                tags=request.tags,
                asked_by_id=asker.id,
            )

            return CreateDoubtResponse.from_doubt(doubt, asker)
