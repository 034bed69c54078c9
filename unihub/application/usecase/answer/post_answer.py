"""Post answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.domain.service import DoubtService, UserService
from unihub.domain.value import DoubtId, UserId

from .list_answers import AnswerItem


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    doubt_id: str  # UUID string
    user_id: str  # Author, from authenticated user
    content: str


class PostAnswerResponse(AnswerItem):
    """Created answer."""


class PostAnswerUseCase:
    """Use case for answering a doubt."""

    def __init__(self, doubt_service: DoubtService, user_service: UserService) -> None:
        """Initialize post answer use case.

        Args:
            doubt_service: Doubt domain service
            user_service: User domain service
        """
        self.doubt_service = doubt_service
        self.user_service = user_service

    async def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the doubt or the author doesn't exist
        """
        with logfire.span(
            "post_answer.execute", doubt_id=request.doubt_id, user_id=request.user_id
        ):
            author = await self.user_service.resolve_user(UserId(UUID(request.user_id)))
            answer = await self.doubt_service.post_answer(
                DoubtId(UUID(request.doubt_id)), author.id, request.content
            )
            return PostAnswerResponse.from_answer(answer, author)
