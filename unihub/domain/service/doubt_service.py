"""Doubt domain service."""

from dataclasses import dataclass
from datetime import datetime
from math import ceil
from typing import Sequence
from uuid import uuid4

import logfire

from unihub.config import PaginationSettings
from unihub.domain.error import NotFoundError
from unihub.domain.model.answer import Answer
from unihub.domain.model.doubt import (
    CONTENT_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Doubt,
    clean_tags,
)
from unihub.domain.model.user import User
from unihub.domain.repository import DoubtFilter, DoubtRepository
from unihub.domain.value import (
    DoubtId,
    SearchKind,
    UserId,
    VotableType,
    VoteDirection,
    VoteOutcome,
)

from .answer_service import AnswerService
from .authorization import Action, authorize
from .base import Service
from .search_service import SearchService
from .validation import require_paging, require_semester, require_text
from .vote_ledger import VoteLedger


@dataclass
class DoubtPage:
    """One page of a doubt listing."""

    doubts: list[Doubt]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.page_size)


class DoubtService(Service):
    """Domain service for the doubt aggregate.

    Mutations lock the doubt row (``find_by_id(for_update=True)``) so that
    votes, answers and solve toggles on one doubt serialize. The search
    index is refreshed after each mutation that changes indexed text.
    """

    def __init__(
        self,
        doubt_repository: DoubtRepository,
        answer_service: AnswerService,
        vote_ledger: VoteLedger,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize doubt service.

        Args:
            doubt_repository: Doubt repository
            answer_service: Answer domain service
            vote_ledger: Vote ledger
            search_service: Search domain service
            pagination_settings: Pagination settings
        """
        self.doubt_repository = doubt_repository
        self.answer_service = answer_service
        self.vote_ledger = vote_ledger
        self.search_service = search_service
        self.pagination_settings = pagination_settings

    async def _lock(self, doubt_id: DoubtId) -> Doubt:
        doubt = await self.doubt_repository.find_by_id(doubt_id, for_update=True)
        if not doubt:
            logfire.warn("Doubt not found", doubt_id=str(doubt_id))
            raise NotFoundError("Doubt", str(doubt_id))
        return doubt

    async def create(
        self,
        title: str,
        content: str,
        subject: str,
        semester: int,
        tags: Sequence[str],
        asked_by_id: UserId,
    ) -> Doubt:
        """Ask a new doubt.

        Fields are checked in the order title, content, subject, semester and
        the first violation is reported.

        Returns:
            Created doubt (unsolved, no votes, no answers)

        Raises:
            ValidationError: Naming the first invalid field
        """
        with logfire.span("doubt_service.create", asked_by_id=str(asked_by_id)):
            title = require_text("title", title, TITLE_MAX_LENGTH)
            require_text("content", content, CONTENT_MAX_LENGTH)
            subject = require_text("subject", subject, SUBJECT_MAX_LENGTH)
            semester = require_semester(semester)

            now = datetime.now()
            doubt = Doubt(
                id=DoubtId(uuid4()),
                title=title,
                content=content,
                subject=subject,
                semester=semester,
                tags=clean_tags(list(tags)),
                asked_by_id=asked_by_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.doubt_repository.save(doubt)
            logfire.info("Doubt created", doubt_id=str(saved.id), subject=saved.subject)

            await self.search_service.index(saved)
            return saved

    async def get(self, doubt_id: DoubtId) -> Doubt:
        """Get a doubt by ID.

        Raises:
            NotFoundError: If the doubt doesn't exist
        """
        with logfire.span("doubt_service.get", doubt_id=str(doubt_id)):
            doubt = await self.doubt_repository.find_by_id(doubt_id)
            if not doubt:
                logfire.warn("Doubt not found", doubt_id=str(doubt_id))
                raise NotFoundError("Doubt", str(doubt_id))
            return doubt

    async def get_many(self, doubt_ids: Sequence[DoubtId]) -> list[Doubt]:
        """Get several doubts in the given order, skipping missing ones."""
        if not doubt_ids:
            return []
        found = {d.id: d for d in await self.doubt_repository.find_by_ids(doubt_ids)}
        return [found[doubt_id] for doubt_id in doubt_ids if doubt_id in found]

    async def list_doubts(
        self, doubt_filter: DoubtFilter, page: int = 1, page_size: int | None = None
    ) -> DoubtPage:
        """List doubts matching a filter, newest first.

        Args:
            doubt_filter: Conjunctive filter
            page: 1-based page number
            page_size: Page size (defaults to the configured size)

        Returns:
            The requested page and the total match count

        Raises:
            ValidationError: If page or page_size is out of range
        """
        page_size = require_paging(page, page_size, self.pagination_settings)

        with logfire.span(
            "doubt_service.list_doubts",
            filter=doubt_filter.model_dump(exclude_none=True),
            page=page,
            page_size=page_size,
        ):
            total = await self.doubt_repository.count(doubt_filter)
            doubts = await self.doubt_repository.find_all(
                doubt_filter, limit=page_size, offset=(page - 1) * page_size
            )
            logfire.info("Doubts listed", total=total, returned=len(doubts))
            return DoubtPage(doubts=doubts, total=total, page=page, page_size=page_size)

    async def vote(
        self, doubt_id: DoubtId, voter_id: UserId | None, direction: VoteDirection
    ) -> VoteOutcome:
        """Cast a vote on a doubt.

        Raises:
            NotFoundError: If the doubt doesn't exist
            UnauthenticatedError: If there is no voter
        """
        with logfire.span(
            "doubt_service.vote",
            doubt_id=str(doubt_id),
            user_id=str(voter_id),
            direction=direction.value,
        ):
            await self._lock(doubt_id)

            change = await self.vote_ledger.cast_vote(
                VotableType.DOUBT, doubt_id, voter_id, direction
            )
            updated = await self.doubt_repository.apply_vote_delta(
                doubt_id, change.up_delta, change.down_delta
            )
            if not updated:
                raise NotFoundError("Doubt", str(doubt_id))

            return VoteOutcome(
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
                user_vote=change.user_vote,
            )

    async def toggle_solved(self, doubt_id: DoubtId, requester: User) -> bool:
        """Flip the solved flag. Only the asker may do this.

        Returns:
            The new solved state

        Raises:
            NotFoundError: If the doubt doesn't exist
            ForbiddenError: If the requester is not the asker
        """
        with logfire.span(
            "doubt_service.toggle_solved",
            doubt_id=str(doubt_id),
            user_id=str(requester.id),
        ):
            doubt = await self._lock(doubt_id)
            authorize(
                requester,
                Action.TOGGLE_SOLVED,
                "doubt",
                doubt_id,
                owner_id=doubt.asked_by_id,
            )

            updated = await self.doubt_repository.set_solved(
                doubt_id, not doubt.is_solved
            )
            if not updated:
                raise NotFoundError("Doubt", str(doubt_id))

            logfire.info(
                "Doubt solved state toggled",
                doubt_id=str(doubt_id),
                is_solved=updated.is_solved,
            )
            return updated.is_solved

    async def post_answer(
        self, doubt_id: DoubtId, author_id: UserId | None, content: str
    ) -> Answer:
        """Answer a doubt. Anyone authenticated may answer, the asker included."""
        return await self.answer_service.add_answer(doubt_id, author_id, content)

    async def delete(self, doubt_id: DoubtId, requester: User) -> None:
        """Delete a doubt with its answers, every vote on them and its search document.

        Raises:
            NotFoundError: If the doubt doesn't exist
            ForbiddenError: If the requester is neither the asker nor faculty
        """
        with logfire.span(
            "doubt_service.delete", doubt_id=str(doubt_id), user_id=str(requester.id)
        ):
            doubt = await self._lock(doubt_id)
            authorize(
                requester,
                Action.DELETE_DOUBT,
                "doubt",
                doubt_id,
                owner_id=doubt.asked_by_id,
            )

            await self.answer_service.remove_all(doubt_id)
            await self.vote_ledger.clear(VotableType.DOUBT, [doubt_id])
            await self.doubt_repository.delete(doubt_id)
            logfire.info("Doubt deleted", doubt_id=str(doubt_id))

            await self.search_service.remove(SearchKind.DOUBTS, doubt_id)
