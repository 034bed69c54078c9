"""Study note routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from unihub.application.usecase.auth import GetCurrentUserUseCase
from unihub.application.usecase.note import (
    CreateNoteRequest,
    CreateNoteResponse,
    CreateNoteUseCase,
    DeleteNoteRequest,
    DeleteNoteResponse,
    DeleteNoteUseCase,
    GetNoteRequest,
    GetNoteResponse,
    GetNoteUseCase,
    LikeNoteRequest,
    LikeNoteResponse,
    LikeNoteUseCase,
    ListNotesRequest,
    ListNotesResponse,
    ListNotesUseCase,
)
from unihub.interface.api.identity import optional_user, require_user

router = APIRouter(prefix="/notes", tags=["notes"], route_class=DishkaRoute)


class CreateNoteAPIRequest(BaseModel):
    """API request for sharing a note."""

    title: str
    description: str = ""
    subject: str
    semester: int
    tags: list[str] = []


@router.get("", response_model=ListNotesResponse)
async def list_notes(
    list_notes_use_case: FromDishka[ListNotesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    semester: int | None = None,
    subject: str | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotesResponse:
    """List notes, newest first.

    ``search`` matches notes where one of title, description, subject or
    tags contains every word of the query.
    """
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await list_notes_use_case.execute(
        ListNotesRequest(
            semester=semester,
            subject=subject,
            search=search,
            page=page,
            limit=limit,
            user_id=user.user_id if user else None,
        )
    )


@router.post("", response_model=CreateNoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: CreateNoteAPIRequest,
    create_note_use_case: FromDishka[CreateNoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateNoteResponse:
    """Share a study note."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await create_note_use_case.execute(
        CreateNoteRequest(
            title=request.title,
            description=request.description,
            subject=request.subject,
            semester=request.semester,
            tags=request.tags,
            user_id=user.user_id,
        )
    )


@router.get("/{note_id}", response_model=GetNoteResponse)
async def get_note(
    note_id: UUID,
    get_note_use_case: FromDishka[GetNoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetNoteResponse:
    """Get a note."""
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await get_note_use_case.execute(
        GetNoteRequest(note_id=str(note_id), user_id=user.user_id if user else None)
    )


@router.post("/{note_id}/like", response_model=LikeNoteResponse)
async def like_note(
    note_id: UUID,
    like_note_use_case: FromDishka[LikeNoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LikeNoteResponse:
    """Like a note, or withdraw an existing like."""
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await like_note_use_case.execute(
        LikeNoteRequest(note_id=str(note_id), user_id=user.user_id if user else None)
    )


@router.delete("/{note_id}", response_model=DeleteNoteResponse)
async def delete_note(
    note_id: UUID,
    delete_note_use_case: FromDishka[DeleteNoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteNoteResponse:
    """Delete a note. Only the uploader or faculty may delete."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await delete_note_use_case.execute(
        DeleteNoteRequest(note_id=str(note_id), user_id=user.user_id)
    )
