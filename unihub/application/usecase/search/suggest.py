"""Search suggestions use case."""

from pydantic import BaseModel

from unihub.domain.service import SearchService


class SuggestRequest(BaseModel):
    """Suggestions request."""

    q: str = ""


class SuggestResponse(BaseModel):
    """Suggestions response."""

    suggestions: list[str]


class SuggestUseCase:
    """Use case for title autocomplete."""

    def __init__(self, search_service: SearchService) -> None:
        """Initialize suggest use case.

        Args:
            search_service: Search domain service
        """
        self.search_service = search_service

    async def execute(self, request: SuggestRequest) -> SuggestResponse:
        """Execute suggest flow.

        Returns:
            Up to the configured number of titles, newest first
        """
        suggestions = await self.search_service.suggest(request.q)
        return SuggestResponse(suggestions=suggestions)
