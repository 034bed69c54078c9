"""PostgreSQL implementation of Note repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from unihub.domain.model import Note
from unihub.domain.repository import NoteFilter, NoteRepository
from unihub.domain.value import NoteId
from unihub.persistence.mappers import note_to_dict, row_to_note
from unihub.persistence.tables import notes_table


def _filter_clauses(note_filter: NoteFilter) -> list:
    """Build WHERE clauses for a note filter."""
    clauses = []
    if note_filter.semester is not None:
        clauses.append(notes_table.c.semester == note_filter.semester)
    if note_filter.subject is not None:
        clauses.append(notes_table.c.subject == note_filter.subject)

    tokens = note_filter.search_tokens
    if tokens:
        fields = [
            notes_table.c.title,
            notes_table.c.description,
            notes_table.c.subject,
            func.array_to_string(notes_table.c.tags, " "),
        ]
        clauses.append(
            or_(
                *[
                    and_(*[field.icontains(token, autoescape=True) for token in tokens])
                    for field in fields
                ]
            )
        )
    return clauses


class PostgresNoteRepository(NoteRepository):
    """PostgreSQL implementation of NoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, note_id: NoteId, for_update: bool = False) -> Optional[Note]:
        """Find a note by ID, optionally locking the row."""
        stmt = select(notes_table).where(notes_table.c.id == note_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_note(dict(row)) if row else None

    async def find_by_ids(self, note_ids: Sequence[NoteId]) -> List[Note]:
        """Find several notes at once."""
        if not note_ids:
            return []

        stmt = select(notes_table).where(notes_table.c.id.in_(note_ids))
        result = await self.session.execute(stmt)
        return [row_to_note(dict(row)) for row in result.mappings().all()]

    async def find_all(
        self, note_filter: NoteFilter, limit: int = 10, offset: int = 0
    ) -> List[Note]:
        """Find notes with filtering and pagination, newest first."""
        with logfire.span(
            "note_repository.find_all",
            filter=note_filter.model_dump(exclude_none=True),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(notes_table)
                .where(*_filter_clauses(note_filter))
                .order_by(desc(notes_table.c.created_at), desc(notes_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_note(dict(row)) for row in result.mappings().all()]

    async def count(self, note_filter: NoteFilter) -> int:
        """Count notes matching the filter."""
        stmt = (
            select(func.count())
            .select_from(notes_table)
            .where(*_filter_clauses(note_filter))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, note: Note) -> Note:
        """Save a note (create or update)."""
        values = note_to_dict(note)
        existing = await self.find_by_id(note.id)
        if existing:
            stmt = update(notes_table).where(notes_table.c.id == note.id).values(**values)
        else:
            stmt = notes_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return note

    async def delete(self, note_id: NoteId) -> None:
        """Hard delete a note."""
        stmt = delete(notes_table).where(notes_table.c.id == note_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def apply_like_delta(self, note_id: NoteId, delta: int) -> Optional[Note]:
        """Atomically adjust the like count."""
        stmt = (
            update(notes_table)
            .where(notes_table.c.id == note_id)
            .values(likes=notes_table.c.likes + delta)
            .returning(notes_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_note(dict(row)) if row else None
