"""Search use cases."""

from .search import SearchRequest, SearchResponse, SearchResultGroups, SearchUseCase
from .suggest import SuggestRequest, SuggestResponse, SuggestUseCase

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SearchResultGroups",
    "SearchUseCase",
    "SuggestRequest",
    "SuggestResponse",
    "SuggestUseCase",
]
