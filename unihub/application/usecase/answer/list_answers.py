"""List answers use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.common import AuthorInfo
from unihub.domain.model import Answer, User
from unihub.domain.service import AnswerService, UserService, VoteLedger
from unihub.domain.value import DoubtId, UserId, VotableType, VoteDirection


class AnswerItem(BaseModel):
    """Answer in responses."""

    answer_id: str
    doubt_id: str
    content: str
    author_id: str
    author: AuthorInfo | None
    position: int
    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None
    created_at: datetime

    @classmethod
    def from_answer(
        cls,
        answer: Answer,
        author: User | None,
        user_vote: VoteDirection | None = None,
    ) -> "AnswerItem":
        return cls(
            answer_id=str(answer.id),
            doubt_id=str(answer.doubt_id),
            content=answer.content,
            author_id=str(answer.author_id),
            author=AuthorInfo.from_user(author),
            position=answer.position,
            upvotes=answer.upvotes,
            downvotes=answer.downvotes,
            user_vote=user_vote,
            created_at=answer.created_at,
        )


class ListAnswersRequest(BaseModel):
    """List answers request."""

    doubt_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerItem]


class ListAnswersUseCase:
    """Use case for listing the answers of a doubt in creation order."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the doubt doesn't exist
        """
        answers = await self.answer_service.list_answers(DoubtId(UUID(request.doubt_id)))

        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        authors = await self.user_service.get_users(
            [answer.author_id for answer in answers]
        )
        user_votes = await self.vote_ledger.votes_of(
            VotableType.ANSWER, [answer.id for answer in answers], user_id
        )

        return ListAnswersResponse(
            answers=[
                AnswerItem.from_answer(
                    answer, authors.get(answer.author_id), user_votes.get(answer.id)
                )
                for answer in answers
            ]
        )
