"""Search repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional
from uuid import UUID

from unihub.domain.model.search import SearchDocument
from unihub.domain.value import SearchKind


class SearchRepository(ABC):
    """Backing store of the search index.

    Stores search documents together with their inverted-index terms.
    Implementations raise SearchUnavailableError when the store cannot
    serve a request.
    """

    @abstractmethod
    async def save(self, document: SearchDocument, terms: Collection[str]) -> None:
        """Upsert a document and replace its index terms.

        Args:
            document: The search document
            terms: Every distinct term of the document's indexed fields
        """
        pass

    @abstractmethod
    async def delete(self, kind: SearchKind, source_id: UUID) -> bool:
        """Remove a document and its terms.

        Args:
            kind: Document kind
            source_id: ID of the source entity

        Returns:
            True if a document was removed
        """
        pass

    @abstractmethod
    async def find_candidates(
        self, fragments: Collection[str], kind: Optional[SearchKind] = None
    ) -> List[SearchDocument]:
        """Find documents having, for every fragment, a term containing it.

        This is a candidate set: the caller applies per-field matching and
        ranking.

        Args:
            fragments: Lowercase alphanumeric fragments of the query (none
                matches every document)
            kind: Restrict to one kind (None for all)

        Returns:
            Candidate documents
        """
        pass

    @abstractmethod
    async def find_titles_by_prefix(self, prefix: str, limit: int) -> List[str]:
        """Find distinct titles starting with a prefix (case-insensitive).

        Args:
            prefix: Title prefix
            limit: Maximum number of titles

        Returns:
            Distinct titles, most recently indexed source first
        """
        pass
