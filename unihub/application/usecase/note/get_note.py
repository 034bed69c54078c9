"""Get note use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from unihub.application.usecase.common import AuthorInfo
from unihub.domain.model import Note, User
from unihub.domain.service import NoteService, UserService, VoteLedger
from unihub.domain.value import NoteId, UserId, VotableType


class NoteItem(BaseModel):
    """Note in responses."""

    note_id: str
    title: str
    description: str
    subject: str
    semester: int
    tags: list[str]
    uploaded_by_id: str
    uploaded_by: AuthorInfo | None
    likes: int
    liked: bool
    created_at: datetime

    @classmethod
    def from_note(cls, note: Note, uploader: User | None, liked: bool = False):
        return cls(
            note_id=str(note.id),
            title=note.title,
            description=note.description,
            subject=note.subject,
            semester=note.semester,
            tags=note.tags,
            uploaded_by_id=str(note.uploaded_by_id),
            uploaded_by=AuthorInfo.from_user(uploader),
            likes=note.likes,
            liked=liked,
            created_at=note.created_at,
        )


class GetNoteRequest(BaseModel):
    """Get note request."""

    note_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetNoteResponse(NoteItem):
    """Note details."""


class GetNoteUseCase:
    """Use case for retrieving a note."""

    def __init__(
        self,
        note_service: NoteService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize get note use case.

        Args:
            note_service: Note domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.note_service = note_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetNoteRequest) -> GetNoteResponse:
        """Execute get note flow.

        Raises:
            NotFoundError: If the note doesn't exist
        """
        note = await self.note_service.get(NoteId(UUID(request.note_id)))

        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        likes = await self.vote_ledger.votes_of(VotableType.NOTE, [note.id], user_id)
        uploaders = await self.user_service.get_users([note.uploaded_by_id])

        return GetNoteResponse.from_note(
            note, uploaders.get(note.uploaded_by_id), note.id in likes
        )
