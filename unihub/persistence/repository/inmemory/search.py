"""In-memory search index store for testing."""

from typing import Collection, Optional
from uuid import UUID

from unihub.domain.error import SearchUnavailableError
from unihub.domain.model import SearchDocument
from unihub.domain.repository import SearchRepository
from unihub.domain.value import SearchKind


class InMemorySearchRepository(SearchRepository):
    """In-memory implementation of SearchRepository for testing.

    Set ``available = False`` to simulate a backing store outage.
    """

    def __init__(self) -> None:
        self._documents: dict[tuple[SearchKind, UUID], SearchDocument] = {}
        self._terms: dict[tuple[SearchKind, UUID], set[str]] = {}
        self.available = True

    def _check(self) -> None:
        if not self.available:
            raise SearchUnavailableError("In-memory search store is offline")

    async def save(self, document: SearchDocument, terms: Collection[str]) -> None:
        """Upsert a document and replace its terms."""
        self._check()
        self._documents[document.key] = document
        self._terms[document.key] = set(terms)

    async def delete(self, kind: SearchKind, source_id: UUID) -> bool:
        """Remove a document and its terms."""
        self._check()
        self._terms.pop((kind, source_id), None)
        return self._documents.pop((kind, source_id), None) is not None

    async def find_candidates(
        self, fragments: Collection[str], kind: Optional[SearchKind] = None
    ) -> list[SearchDocument]:
        """Find documents having, for every fragment, a term containing it."""
        self._check()
        return [
            document
            for key, document in self._documents.items()
            if (kind is None or document.kind == kind)
            and all(
                any(fragment in term for term in self._terms[key])
                for fragment in fragments
            )
        ]

    async def find_titles_by_prefix(self, prefix: str, limit: int) -> list[str]:
        """Find distinct titles starting with a prefix, most recent first."""
        self._check()
        lowered = prefix.lower()
        matching = sorted(
            (d for d in self._documents.values() if d.title.lower().startswith(lowered)),
            key=lambda d: d.created_at,
            reverse=True,
        )
        return list(dict.fromkeys(d.title for d in matching))[:limit]
