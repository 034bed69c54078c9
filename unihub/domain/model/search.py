"""Search projections.

Search documents are derived from doubts, notes and events. They are
regenerated whenever the source's textual fields change and are never
edited directly.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from unihub.domain.model.common import DomainModel
from unihub.domain.value import SearchKind


class SearchDocument(DomainModel):
    """Denormalized text-searchable projection of a source entity."""

    kind: SearchKind
    source_id: UUID
    title: str
    content: str = ""
    subject: str = ""
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> tuple[SearchKind, UUID]:
        return (self.kind, self.source_id)


class SearchHit(DomainModel):
    """Ranked reference to a matching search document."""

    document: SearchDocument
    score: int


class SearchResults(DomainModel):
    """Ranked hits for one query.

    degraded is set when the backing store could not serve the query; the
    hits are then empty.
    """

    hits: list[SearchHit] = Field(default_factory=list)
    degraded: bool = False

    def for_kind(self, kind: SearchKind) -> list[SearchHit]:
        return [hit for hit in self.hits if hit.document.kind == kind]
