"""Create note use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from unihub.domain.service import NoteService, UserService
from unihub.domain.value import UserId

from .get_note import NoteItem


class CreateNoteRequest(BaseModel):
    """Create note request."""

    title: str
    description: str = ""
    subject: str
    semester: int
    tags: list[str] = []
    user_id: str  # Uploader, from authenticated user


class CreateNoteResponse(NoteItem):
    """Created note."""


class CreateNoteUseCase:
    """Use case for registering note metadata."""

    def __init__(self, note_service: NoteService, user_service: UserService) -> None:
        """Initialize create note use case.

        Args:
            note_service: Note domain service
            user_service: User domain service
        """
        self.note_service = note_service
        self.user_service = user_service

    async def execute(self, request: CreateNoteRequest) -> CreateNoteResponse:
        """Execute create note flow.

        Raises:
            ValidationError: Naming the first invalid field
        """
        with logfire.span("create_note.execute", user_id=request.user_id):
            uploader = await self.user_service.resolve_user(
                UserId(UUID(request.user_id))
            )
            note = await self.note_service.create(
                title=request.title,
                description=request.description,
                subject=request.subject,
                semester=request.semester,
                tags=request.tags,
                uploaded_by_id=uploader.id,
            )
            return CreateNoteResponse.from_note(note, uploader)
