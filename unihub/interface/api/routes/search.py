"""Search routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from unihub.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
    SuggestRequest,
    SuggestResponse,
    SuggestUseCase,
)

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchResponse)
async def search(
    search_use_case: FromDishka[SearchUseCase],
    q: str = "",
    type: Literal["all", "notes", "doubts", "events"] = "all",
) -> SearchResponse:
    """Search notes, doubts and events.

    Returns 200 with ``degraded: true`` and no results when the index is
    unavailable.
    """
    return await search_use_case.execute(SearchRequest(q=q, type=type))


@router.get("/suggestions", response_model=SuggestResponse)
async def suggestions(
    suggest_use_case: FromDishka[SuggestUseCase],
    q: str = "",
) -> SuggestResponse:
    """Autocomplete titles from the search index."""
    return await suggest_use_case.execute(SuggestRequest(q=q))
