"""Like note use case."""

from uuid import UUID

from pydantic import BaseModel

from unihub.domain.service import NoteService
from unihub.domain.value import NoteId, UserId


class LikeNoteRequest(BaseModel):
    """Like note request."""

    note_id: str  # UUID string
    user_id: str | None  # User ID from authenticated user


class LikeNoteResponse(BaseModel):
    """Like note response."""

    likes: int
    liked: bool


class LikeNoteUseCase:
    """Use case for liking or un-liking a note."""

    def __init__(self, note_service: NoteService) -> None:
        """Initialize like note use case.

        Args:
            note_service: Note domain service
        """
        self.note_service = note_service

    async def execute(self, request: LikeNoteRequest) -> LikeNoteResponse:
        """Execute like flow. Liking a liked note takes the like back.

        Raises:
            NotFoundError: If the note doesn't exist
            UnauthenticatedError: If there is no user
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        outcome = await self.note_service.like(NoteId(UUID(request.note_id)), user_id)
        return LikeNoteResponse(
            likes=outcome.upvotes, liked=outcome.user_vote is not None
        )
