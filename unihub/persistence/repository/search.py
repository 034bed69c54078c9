"""PostgreSQL implementation of the search index store.

Documents live in ``search_documents``; ``search_terms`` is the inverted
index (one row per distinct document term). Every operation runs inside a
savepoint so that an index failure never aborts the request transaction.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Collection, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, desc, exists, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unihub.domain.error import SearchUnavailableError
from unihub.domain.model import SearchDocument
from unihub.domain.repository import SearchRepository
from unihub.domain.value import SearchKind
from unihub.persistence.mappers import row_to_search_document, search_document_to_dict
from unihub.persistence.tables import search_documents_table, search_terms_table


class PostgresSearchRepository(SearchRepository):
    """PostgreSQL implementation of SearchRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            async with self.session.begin_nested():
                yield
        except SQLAlchemyError as e:
            logfire.error("Search store failure", operation=operation, error=str(e))
            raise SearchUnavailableError(f"Search store failed during {operation}") from e

    async def save(self, document: SearchDocument, terms: Collection[str]) -> None:
        """Upsert a document and replace its terms."""
        values = search_document_to_dict(document)
        async with self._guard("save"):
            stmt = insert(search_documents_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[
                    search_documents_table.c.kind,
                    search_documents_table.c.source_id,
                ],
                set_={
                    key: value
                    for key, value in values.items()
                    if key not in ("kind", "source_id")
                },
            )
            await self.session.execute(stmt)

            await self.session.execute(
                delete(search_terms_table).where(
                    and_(
                        search_terms_table.c.kind == document.kind.value,
                        search_terms_table.c.source_id == document.source_id,
                    )
                )
            )
            if terms:
                await self.session.execute(
                    insert(search_terms_table),
                    [
                        {
                            "kind": document.kind.value,
                            "source_id": document.source_id,
                            "term": term,
                        }
                        for term in sorted(terms)
                    ],
                )

    async def delete(self, kind: SearchKind, source_id: UUID) -> bool:
        """Remove a document (terms cascade)."""
        async with self._guard("delete"):
            result = await self.session.execute(
                delete(search_documents_table).where(
                    and_(
                        search_documents_table.c.kind == kind.value,
                        search_documents_table.c.source_id == source_id,
                    )
                )
            )
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_candidates(
        self, fragments: Collection[str], kind: Optional[SearchKind] = None
    ) -> List[SearchDocument]:
        """Find documents having, for every fragment, a term containing it."""
        docs = search_documents_table
        terms = search_terms_table

        stmt = select(docs)
        for fragment in fragments:
            stmt = stmt.where(
                exists().where(
                    and_(
                        terms.c.kind == docs.c.kind,
                        terms.c.source_id == docs.c.source_id,
                        terms.c.term.contains(fragment, autoescape=True),
                    )
                )
            )
        if kind is not None:
            stmt = stmt.where(docs.c.kind == kind.value)

        async with self._guard("find_candidates"):
            result = await self.session.execute(stmt)
            return [row_to_search_document(dict(row)) for row in result.mappings().all()]

    async def find_titles_by_prefix(self, prefix: str, limit: int) -> List[str]:
        """Find distinct titles starting with a prefix, most recent first."""
        docs = search_documents_table
        latest = func.max(docs.c.created_at).label("latest")
        stmt = (
            select(docs.c.title, latest)
            .where(func.lower(docs.c.title).startswith(prefix.lower(), autoescape=True))
            .group_by(docs.c.title)
            .order_by(desc(latest))
            .limit(limit)
        )

        async with self._guard("find_titles_by_prefix"):
            result = await self.session.execute(stmt)
            return [row.title for row in result.fetchall()]
