"""Note domain service."""

from dataclasses import dataclass
from math import ceil
from typing import Sequence
from uuid import uuid4

import logfire

from unihub.config import PaginationSettings
from unihub.domain.error import NotFoundError
from unihub.domain.model import Note, User
from unihub.domain.model.doubt import SUBJECT_MAX_LENGTH, TITLE_MAX_LENGTH, clean_tags
from unihub.domain.repository import NoteFilter, NoteRepository
from unihub.domain.value import (
    NoteId,
    SearchKind,
    UserId,
    VotableType,
    VoteDirection,
    VoteOutcome,
)

from .authorization import Action, authorize
from .base import Service
from .search_service import SearchService
from .validation import require_paging, require_semester, require_text
from .vote_ledger import VoteLedger


@dataclass
class NotePage:
    """One page of a note listing."""

    notes: list[Note]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.page_size)


class NoteService(Service):
    """Domain service for note metadata and likes.

    A like is an up-vote in the shared vote ledger; liking again takes it back.
    """

    def __init__(
        self,
        note_repository: NoteRepository,
        vote_ledger: VoteLedger,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize note service.

        Args:
            note_repository: Note repository
            vote_ledger: Vote ledger
            search_service: Search domain service
            pagination_settings: Pagination settings
        """
        self.note_repository = note_repository
        self.vote_ledger = vote_ledger
        self.search_service = search_service
        self.pagination_settings = pagination_settings

    async def create(
        self,
        title: str,
        description: str,
        subject: str,
        semester: int,
        tags: Sequence[str],
        uploaded_by_id: UserId,
    ) -> Note:
        """Register a note and index it.

        Raises:
            ValidationError: Naming the first invalid field
        """
        with logfire.span("note_service.create", uploaded_by_id=str(uploaded_by_id)):
            title = require_text("title", title, TITLE_MAX_LENGTH)
            subject = require_text("subject", subject, SUBJECT_MAX_LENGTH)
            semester = require_semester(semester)

            note = Note(
                id=NoteId(uuid4()),
                title=title,
                description=description or "",
                subject=subject,
                semester=semester,
                tags=clean_tags(list(tags)),
                uploaded_by_id=uploaded_by_id,
            )
            saved = await self.note_repository.save(note)
            logfire.info("Note created", note_id=str(saved.id))

            await self.search_service.index(saved)
            return saved

    async def get(self, note_id: NoteId) -> Note:
        """Get a note by ID.

        Raises:
            NotFoundError: If the note doesn't exist
        """
        with logfire.span("note_service.get", note_id=str(note_id)):
            note = await self.note_repository.find_by_id(note_id)
            if not note:
                logfire.warn("Note not found", note_id=str(note_id))
                raise NotFoundError("Note", str(note_id))
            return note

    async def get_many(self, note_ids: Sequence[NoteId]) -> list[Note]:
        """Get several notes in the given order, skipping missing ones."""
        if not note_ids:
            return []
        found = {n.id: n for n in await self.note_repository.find_by_ids(note_ids)}
        return [found[note_id] for note_id in note_ids if note_id in found]

    async def list_notes(
        self, note_filter: NoteFilter, page: int = 1, page_size: int | None = None
    ) -> NotePage:
        """List notes matching a filter, newest first.

        Raises:
            ValidationError: If page or page_size is out of range
        """
        page_size = require_paging(page, page_size, self.pagination_settings)

        with logfire.span(
            "note_service.list_notes",
            filter=note_filter.model_dump(exclude_none=True),
            page=page,
            page_size=page_size,
        ):
            total = await self.note_repository.count(note_filter)
            notes = await self.note_repository.find_all(
                note_filter, limit=page_size, offset=(page - 1) * page_size
            )
            logfire.info("Notes listed", total=total, returned=len(notes))
            return NotePage(notes=notes, total=total, page=page, page_size=page_size)

    async def like(self, note_id: NoteId, user_id: UserId | None) -> VoteOutcome:
        """Toggle a like on a note.

        Returns:
            Like count (as upvotes) and whether the user now likes the note

        Raises:
            NotFoundError: If the note doesn't exist
            UnauthenticatedError: If there is no user
        """
        with logfire.span("note_service.like", note_id=str(note_id), user_id=str(user_id)):
            note = await self.note_repository.find_by_id(note_id, for_update=True)
            if not note:
                raise NotFoundError("Note", str(note_id))

            change = await self.vote_ledger.cast_vote(
                VotableType.NOTE, note_id, user_id, VoteDirection.UP
            )
            updated = await self.note_repository.apply_like_delta(
                note_id, change.up_delta
            )
            if not updated:
                raise NotFoundError("Note", str(note_id))

            return VoteOutcome(
                upvotes=updated.likes, downvotes=0, user_vote=change.user_vote
            )

    async def delete(self, note_id: NoteId, requester: User) -> None:
        """Delete a note with its likes and search document.

        Raises:
            NotFoundError: If the note doesn't exist
            ForbiddenError: If the requester is neither the uploader nor faculty
        """
        with logfire.span(
            "note_service.delete", note_id=str(note_id), user_id=str(requester.id)
        ):
            note = await self.note_repository.find_by_id(note_id, for_update=True)
            if not note:
                raise NotFoundError("Note", str(note_id))
            authorize(
                requester,
                Action.DELETE_NOTE,
                "note",
                note_id,
                owner_id=note.uploaded_by_id,
            )

            await self.vote_ledger.clear(VotableType.NOTE, [note_id])
            await self.note_repository.delete(note_id)
            logfire.info("Note deleted", note_id=str(note_id))

            await self.search_service.remove(SearchKind.NOTES, note_id)
