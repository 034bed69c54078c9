"""List notes use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.domain.repository import NoteFilter
from unihub.domain.service import NoteService, UserService, VoteLedger
from unihub.domain.value import UserId, VotableType

from .get_note import NoteItem


class ListNotesRequest(BaseModel):
    """List notes request."""

    semester: int | None = None
    subject: str | None = None
    search: str | None = None
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    user_id: str | None = None  # Current user ID (if authenticated)


class ListNotesResponse(BaseModel):
    """List notes response."""

    notes: list[NoteItem]
    total: int
    total_pages: int
    current_page: int


class ListNotesUseCase:
    """Use case for browsing notes with filtering and pagination."""

    def __init__(
        self,
        note_service: NoteService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize list notes use case.

        Args:
            note_service: Note domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.note_service = note_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: ListNotesRequest) -> ListNotesResponse:
        """Execute list notes flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "list_notes.execute",
            semester=request.semester,
            subject=request.subject,
            page=request.page,
        ):
            subject = request.subject.strip() if request.subject else None
            search = request.search.strip() if request.search else None
            note_filter = NoteFilter(
                semester=request.semester,
                subject=subject or None,
                search_text=search or None,
            )

            result = await self.note_service.list_notes(
                note_filter, page=request.page, page_size=request.limit
            )

            uploaders = await self.user_service.get_users(
                [note.uploaded_by_id for note in result.notes]
            )
            user_id = UserId(UUID(request.user_id)) if request.user_id else None
            likes = await self.vote_ledger.votes_of(
                VotableType.NOTE, [note.id for note in result.notes], user_id
            )

            return ListNotesResponse(
                notes=[
                    NoteItem.from_note(
                        note, uploaders.get(note.uploaded_by_id), note.id in likes
                    )
                    for note in result.notes
                ],
                total=result.total,
                total_pages=result.total_pages,
                current_page=result.page,
            )
