"""Doubt and answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, field_validator

from unihub.application.usecase.answer import (
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
    VoteAnswerRequest,
    VoteAnswerUseCase,
)
from unihub.application.usecase.auth import GetCurrentUserUseCase
from unihub.application.usecase.common import VoteResponse, VoteType
from unihub.application.usecase.doubt import (
    CreateDoubtRequest,
    CreateDoubtResponse,
    CreateDoubtUseCase,
    DeleteDoubtRequest,
    DeleteDoubtResponse,
    DeleteDoubtUseCase,
    GetDoubtRequest,
    GetDoubtResponse,
    GetDoubtUseCase,
    ListDoubtsRequest,
    ListDoubtsResponse,
    ListDoubtsUseCase,
    ToggleSolvedRequest,
    ToggleSolvedResponse,
    ToggleSolvedUseCase,
    VoteDoubtRequest,
    VoteDoubtUseCase,
)
from unihub.interface.api.identity import optional_user, require_user

router = APIRouter(prefix="/doubts", tags=["doubts"], route_class=DishkaRoute)


class CreateDoubtAPIRequest(BaseModel):
    """API request for asking a doubt.

    Tags may be sent as a list or as one comma-separated string.
    """

    title: str
    content: str
    subject: str
    semester: int
    tags: list[str] = []

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [tag.strip() for tag in value if tag and tag.strip()]


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    type: VoteType


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a doubt."""

    content: str


@router.get("", response_model=ListDoubtsResponse)
async def list_doubts(
    list_doubts_use_case: FromDishka[ListDoubtsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    semester: int | None = None,
    subject: str | None = None,
    search: str | None = None,
    solved: bool | None = None,
    page: int = 1,
    limit: int | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListDoubtsResponse:
    """List doubts, newest first.

    Filters combine conjunctively. ``search`` matches doubts where one of
    title, content, subject or tags contains every word of the query.
    """
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await list_doubts_use_case.execute(
        ListDoubtsRequest(
            semester=semester,
            subject=subject,
            search=search,
            solved=solved,
            page=page,
            limit=limit,
            user_id=user.user_id if user else None,
        )
    )


@router.post("", response_model=CreateDoubtResponse, status_code=status.HTTP_201_CREATED)
async def create_doubt(
    request: CreateDoubtAPIRequest,
    create_doubt_use_case: FromDishka[CreateDoubtUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateDoubtResponse:
    """Ask a new doubt.

    Requires authentication.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await create_doubt_use_case.execute(
        CreateDoubtRequest(
            title=request.title,
            content=request.content,
            subject=request.subject,
            semester=request.semester,
            tags=request.tags,
            user_id=user.user_id,
        )
    )


@router.get("/{doubt_id}", response_model=GetDoubtResponse)
async def get_doubt(
    doubt_id: UUID,
    get_doubt_use_case: FromDishka[GetDoubtUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetDoubtResponse:
    """Get a doubt with its answers in posting order."""
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await get_doubt_use_case.execute(
        GetDoubtRequest(doubt_id=str(doubt_id), user_id=user.user_id if user else None)
    )


@router.delete("/{doubt_id}", response_model=DeleteDoubtResponse)
async def delete_doubt(
    doubt_id: UUID,
    delete_doubt_use_case: FromDishka[DeleteDoubtUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteDoubtResponse:
    """Delete a doubt with its answers and votes.

    Only the asker or faculty may delete.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await delete_doubt_use_case.execute(
        DeleteDoubtRequest(doubt_id=str(doubt_id), user_id=user.user_id)
    )


@router.post("/{doubt_id}/vote", response_model=VoteResponse)
async def vote_doubt(
    doubt_id: UUID,
    request: VoteAPIRequest,
    vote_doubt_use_case: FromDishka[VoteDoubtUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Vote on a doubt.

    Repeating the current vote withdraws it; voting the other way switches it.
    """
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await vote_doubt_use_case.execute(
        VoteDoubtRequest(
            doubt_id=str(doubt_id),
            user_id=user.user_id if user else None,
            type=request.type,
        )
    )


@router.patch("/{doubt_id}/solve", response_model=ToggleSolvedResponse)
async def toggle_solved(
    doubt_id: UUID,
    toggle_solved_use_case: FromDishka[ToggleSolvedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ToggleSolvedResponse:
    """Flip the solved flag of a doubt. Only the asker may do this."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await toggle_solved_use_case.execute(
        ToggleSolvedRequest(doubt_id=str(doubt_id), user_id=user.user_id)
    )


@router.get("/{doubt_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    doubt_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListAnswersResponse:
    """List the answers of a doubt in posting order."""
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await list_answers_use_case.execute(
        ListAnswersRequest(
            doubt_id=str(doubt_id), user_id=user.user_id if user else None
        )
    )


@router.post(
    "/{doubt_id}/answer",
    response_model=PostAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    doubt_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostAnswerResponse:
    """Answer a doubt.

    Requires authentication.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    return await post_answer_use_case.execute(
        PostAnswerRequest(
            doubt_id=str(doubt_id), user_id=user.user_id, content=request.content
        )
    )


@router.post("/{doubt_id}/answer/{answer_id}/vote", response_model=VoteResponse)
async def vote_answer(
    doubt_id: UUID,
    answer_id: UUID,
    request: VoteAPIRequest,
    vote_answer_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Vote on an answer of a doubt."""
    user = await optional_user(get_current_user_use_case, auth_token, authorization)

    return await vote_answer_use_case.execute(
        VoteAnswerRequest(
            doubt_id=str(doubt_id),
            answer_id=str(answer_id),
            user_id=user.user_id if user else None,
            type=request.type,
        )
    )
