"""List doubts use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.application.usecase.common import AuthorInfo
from unihub.domain.model import Doubt, User
from unihub.domain.repository import DoubtFilter
from unihub.domain.service import DoubtService, UserService, VoteLedger
from unihub.domain.value import UserId, VotableType, VoteDirection


class DoubtItem(BaseModel):
    """Doubt in responses."""

    doubt_id: str
    title: str
    content: str
    subject: str
    semester: int
    tags: list[str]
    asked_by_id: str
    asked_by: AuthorInfo | None
    is_solved: bool
    upvotes: int
    downvotes: int
    answer_count: int
    user_vote: VoteDirection | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_doubt(
        cls,
        doubt: Doubt,
        author: User | None,
        user_vote: VoteDirection | None = None,
        **extra: Any,
    ):
        return cls(
            doubt_id=str(doubt.id),
            title=doubt.title,
            content=doubt.content,
            subject=doubt.subject,
            semester=doubt.semester,
            tags=doubt.tags,
            asked_by_id=str(doubt.asked_by_id),
            asked_by=AuthorInfo.from_user(author),
            is_solved=doubt.is_solved,
            upvotes=doubt.upvotes,
            downvotes=doubt.downvotes,
            answer_count=doubt.answer_count,
            user_vote=user_vote,
            created_at=doubt.created_at,
            updated_at=doubt.updated_at,
            **extra,
        )


class ListDoubtsRequest(BaseModel):
    """List doubts request."""

    semester: int | None = None
    subject: str | None = None
    solved: bool | None = None
    search: str | None = None
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    user_id: str | None = None  # Current user ID (if authenticated)


class ListDoubtsResponse(BaseModel):
    """List doubts response."""

    doubts: list[DoubtItem]
    total: int
    total_pages: int
    current_page: int


class ListDoubtsUseCase:
    """Use case for listing doubts with filtering and pagination."""

    def __init__(
        self,
        doubt_service: DoubtService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize list doubts use case.

        Args:
            doubt_service: Doubt domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.doubt_service = doubt_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: ListDoubtsRequest) -> ListDoubtsResponse:
        """Execute list doubts flow.

        Args:
            request: List doubts request with filters and pagination

        Returns:
            One page of doubts, newest first

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "list_doubts.execute",
            semester=request.semester,
            subject=request.subject,
            solved=request.solved,
            page=request.page,
        ):
            subject = request.subject.strip() if request.subject else None
            search = request.search.strip() if request.search else None
            doubt_filter = DoubtFilter(
                semester=request.semester,
                subject=subject or None,
                solved=request.solved,
                search_text=search or None,
            )

            result = await self.doubt_service.list_doubts(
                doubt_filter, page=request.page, page_size=request.limit
            )

            # Batch lookups to avoid N+1 queries
            authors = await self.user_service.get_users(
                [doubt.asked_by_id for doubt in result.doubts]
            )
            user_id = UserId(UUID(request.user_id)) if request.user_id else None
            user_votes = await self.vote_ledger.votes_of(
                VotableType.DOUBT, [doubt.id for doubt in result.doubts], user_id
            )

            items = [
                DoubtItem.from_doubt(
                    doubt, authors.get(doubt.asked_by_id), user_votes.get(doubt.id)
                )
                for doubt in result.doubts
            ]

            logfire.info("Doubts listed", count=len(items), total=result.total)

            return ListDoubtsResponse(
                doubts=items,
                total=result.total,
                total_pages=result.total_pages,
                current_page=result.page,
            )
