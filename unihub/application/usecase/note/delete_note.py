"""Delete note use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.domain.service import NoteService, UserService
from unihub.domain.value import NoteId, UserId


class DeleteNoteRequest(BaseModel):
    """Delete note request."""

    note_id: str  # UUID string
    user_id: str  # Requester, must be the uploader or faculty


class DeleteNoteResponse(BaseModel):
    """Delete note response."""

    success: bool
    message: str


class DeleteNoteUseCase:
    """Use case for deleting a note."""

    def __init__(self, note_service: NoteService, user_service: UserService) -> None:
        """Initialize delete note use case.

        Args:
            note_service: Note domain service
            user_service: User domain service
        """
        self.note_service = note_service
        self.user_service = user_service

    async def execute(self, request: DeleteNoteRequest) -> DeleteNoteResponse:
        """Execute delete note flow.

        Raises:
            NotFoundError: If the note or the requester doesn't exist
            ForbiddenError: If the requester is neither the uploader nor faculty
        """
        requester = await self.user_service.resolve_user(UserId(UUID(request.user_id)))
        await self.note_service.delete(NoteId(UUID(request.note_id)), requester)
        return DeleteNoteResponse(success=True, message="Note deleted successfully")
