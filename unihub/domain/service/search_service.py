"""Search index domain service."""

import re
from uuid import UUID

import logfire

from unihub.config import SearchSettings
from unihub.domain.error import SearchUnavailableError
from unihub.domain.model import Doubt, Event, Note
from unihub.domain.model.search import SearchDocument, SearchHit, SearchResults
from unihub.domain.repository import SearchRepository
from unihub.domain.value import SearchKind

from .base import Service

# Powers of two: a title match outweighs any combination of the lower fields
FIELD_WEIGHTS: dict[str, int] = {
    "title": 8,
    "content": 4,
    "subject": 2,
    "tags": 1,
}

_TERM_PATTERN = re.compile(r"[^\W_]+")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase alphanumeric terms."""
    return _TERM_PATTERN.findall(text.lower())


def query_tokens(text: str) -> list[str]:
    """Split a query into lowercase whitespace-delimited tokens."""
    return text.lower().split()


def candidate_fragments(tokens: list[str]) -> list[str]:
    """Alphanumeric runs of the query tokens, for the inverted-index lookup.

    Any field text containing a token has, for each of the token's runs,
    an indexed term containing that run.
    """
    return list(dict.fromkeys(tokenize(" ".join(tokens))))


def field_texts(document: SearchDocument) -> dict[str, str]:
    """Lowercased text of every indexed field of a document."""
    return {
        "title": document.title.lower(),
        "content": document.content.lower(),
        "subject": document.subject.lower(),
        "tags": " ".join(document.tags).lower(),
    }


def index_terms(document: SearchDocument) -> set[str]:
    """Distinct terms stored in the inverted index for a document."""
    return {term for text in field_texts(document).values() for term in tokenize(text)}


def score_document(document: SearchDocument, tokens: list[str]) -> int:
    """Score a document against query tokens.

    A field matches when its text contains every query token. The score is
    the sum of the weights of the matching fields, so 0 means the document
    does not match.
    """
    if not tokens:
        return 0

    score = 0
    for field_name, text in field_texts(document).items():
        if all(token in text for token in tokens):
            score += FIELD_WEIGHTS[field_name]
    return score


def document_for(entity: Doubt | Note | Event) -> SearchDocument:
    """Project a doubt, note or event onto its search document."""
    if isinstance(entity, Doubt):
        return SearchDocument(
            kind=SearchKind.DOUBTS,
            source_id=entity.id,
            title=entity.title,
            content=entity.content,
            subject=entity.subject,
            tags=entity.tags,
            created_at=entity.created_at,
        )
    if isinstance(entity, Note):
        return SearchDocument(
            kind=SearchKind.NOTES,
            source_id=entity.id,
            title=entity.title,
            content=entity.description,
            subject=entity.subject,
            tags=entity.tags,
            created_at=entity.created_at,
        )
    return SearchDocument(
        kind=SearchKind.EVENTS,
        source_id=entity.id,
        title=entity.title,
        content=entity.description,
        subject=entity.location or "",
        created_at=entity.created_at,
    )


class SearchService(Service):
    """Domain service maintaining and querying the search index.

    Failures of the backing store never escape: writes log and carry on,
    queries come back empty with ``degraded`` set.
    """

    def __init__(
        self, search_repository: SearchRepository, search_settings: SearchSettings
    ) -> None:
        """Initialize search service.

        Args:
            search_repository: Search repository
            search_settings: Search settings
        """
        self.search_repository = search_repository
        self.search_settings = search_settings

    async def index(self, entity: Doubt | Note | Event) -> bool:
        """Upsert the search document of an entity.

        Args:
            entity: Doubt, note or event in its current state

        Returns:
            True if the document was indexed
        """
        document = document_for(entity)
        with logfire.span(
            "search_service.index",
            kind=document.kind.value,
            source_id=str(document.source_id),
        ):
            try:
                await self.search_repository.save(document, index_terms(document))
            except SearchUnavailableError as e:
                logfire.error(
                    "Indexing failed",
                    kind=document.kind.value,
                    source_id=str(document.source_id),
                    error=str(e),
                )
                return False

            logfire.info("Document indexed", source_id=str(document.source_id))
            return True

    async def remove(self, kind: SearchKind, source_id: UUID) -> bool:
        """Remove the search document of a deleted entity.

        Returns:
            True if a document was removed
        """
        with logfire.span(
            "search_service.remove", kind=kind.value, source_id=str(source_id)
        ):
            try:
                removed = await self.search_repository.delete(kind, source_id)
            except SearchUnavailableError as e:
                logfire.error(
                    "Index removal failed",
                    kind=kind.value,
                    source_id=str(source_id),
                    error=str(e),
                )
                return False

            logfire.info("Document removed", source_id=str(source_id), removed=removed)
            return removed

    async def query(self, text: str, kind: SearchKind | None = None) -> SearchResults:
        """Run a ranked search.

        Args:
            text: Free-text query
            kind: Restrict to one kind (None for all)

        Returns:
            Hits ranked by score then recency, capped per kind
        """
        with logfire.span(
            "search_service.query", query=text, kind=kind.value if kind else None
        ):
            tokens = query_tokens(text)
            if not tokens:
                return SearchResults()

            try:
                candidates = await self.search_repository.find_candidates(
                    candidate_fragments(tokens), kind
                )
            except SearchUnavailableError as e:
                logfire.warn("Search degraded", query=text, error=str(e))
                return SearchResults(degraded=True)

            hits = []
            for document in candidates:
                if kind is not None and document.kind != kind:
                    continue
                score = score_document(document, tokens)
                if score > 0:
                    hits.append(SearchHit(document=document, score=score))
            hits.sort(
                key=lambda hit: (hit.score, hit.document.created_at), reverse=True
            )

            limit = self.search_settings.max_results_per_kind
            per_kind: dict[SearchKind, int] = {}
            capped = []
            for hit in hits:
                seen = per_kind.get(hit.document.kind, 0)
                if seen < limit:
                    per_kind[hit.document.kind] = seen + 1
                    capped.append(hit)

            logfire.info("Search completed", query=text, hits=len(capped))
            return SearchResults(hits=capped)

    async def suggest(self, partial: str) -> list[str]:
        """Autocomplete titles.

        Args:
            partial: Text typed so far

        Returns:
            Distinct indexed titles starting with the text, newest first
        """
        prefix = partial.strip()
        if len(prefix) < self.search_settings.min_suggestion_length:
            return []

        with logfire.span("search_service.suggest", prefix=prefix):
            limit = self.search_settings.suggestion_limit
            try:
                titles = await self.search_repository.find_titles_by_prefix(
                    prefix, limit
                )
            except SearchUnavailableError as e:
                logfire.warn("Suggestions degraded", prefix=prefix, error=str(e))
                return []

            return list(dict.fromkeys(titles))[:limit]
