"""PostgreSQL implementation of Doubt repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from unihub.domain.model import Doubt
from unihub.domain.repository import DoubtFilter, DoubtRepository
from unihub.domain.value import DoubtId
from unihub.persistence.mappers import doubt_to_dict, row_to_doubt
from unihub.persistence.tables import doubts_table


def _filter_clauses(doubt_filter: DoubtFilter) -> list:
    """Build WHERE clauses for a doubt filter."""
    clauses = []
    if doubt_filter.semester is not None:
        clauses.append(doubts_table.c.semester == doubt_filter.semester)
    if doubt_filter.subject is not None:
        clauses.append(doubts_table.c.subject == doubt_filter.subject)
    if doubt_filter.solved is not None:
        clauses.append(doubts_table.c.is_solved.is_(doubt_filter.solved))

    tokens = doubt_filter.search_tokens
    if tokens:
        # One field must contain every token
        fields = [
            doubts_table.c.title,
            doubts_table.c.content,
            doubts_table.c.subject,
            func.array_to_string(doubts_table.c.tags, " "),
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


class PostgresDoubtRepository(DoubtRepository):
    """PostgreSQL implementation of DoubtRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, doubt_id: DoubtId, for_update: bool = False
    ) -> Optional[Doubt]:
        """Find a doubt by ID, optionally locking the row."""
        stmt = select(doubts_table).where(doubts_table.c.id == doubt_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_doubt(dict(row)) if row else None

    async def find_by_ids(self, doubt_ids: Sequence[DoubtId]) -> List[Doubt]:
        """Find several doubts at once."""
        if not doubt_ids:
            return []

        stmt = select(doubts_table).where(doubts_table.c.id.in_(doubt_ids))
        result = await self.session.execute(stmt)
        return [row_to_doubt(dict(row)) for row in result.mappings().all()]

    async def find_all(
        self,
        doubt_filter: DoubtFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Doubt]:
        """Find doubts with filtering and pagination, newest first."""
        with logfire.span(
            "doubt_repository.find_all",
            filter=doubt_filter.model_dump(exclude_none=True),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(doubts_table)
                .where(*_filter_clauses(doubt_filter))
                .order_by(desc(doubts_table.c.created_at), desc(doubts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            doubts = [row_to_doubt(dict(row)) for row in result.mappings().all()]
            logfire.info("Found doubts", count=len(doubts))
            return doubts

    async def count(self, doubt_filter: DoubtFilter) -> int:
        """Count doubts matching the filter."""
        stmt = (
            select(func.count())
            .select_from(doubts_table)
            .where(*_filter_clauses(doubt_filter))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, doubt: Doubt) -> Doubt:
        """Save a doubt (create or update)."""
        with logfire.span("doubt_repository.save", doubt_id=str(doubt.id)):
            existing = await self.find_by_id(doubt.id)
            values = doubt_to_dict(doubt)

            if existing:
                stmt = (
                    update(doubts_table)
                    .where(doubts_table.c.id == doubt.id)
                    .values(**values)
                )
            else:
                stmt = doubts_table.insert().values(**values)

            await self.session.execute(stmt)
            await self.session.flush()
            return doubt

    async def delete(self, doubt_id: DoubtId) -> None:
        """Hard delete a doubt (answers cascade in the database)."""
        stmt = delete(doubts_table).where(doubts_table.c.id == doubt_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def _update_returning(self, doubt_id: DoubtId, **values) -> Optional[Doubt]:
        stmt = (
            update(doubts_table)
            .where(doubts_table.c.id == doubt_id)
            .values(**values)
            .returning(doubts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_doubt(dict(row)) if row else None

    async def apply_vote_delta(
        self, doubt_id: DoubtId, up_delta: int, down_delta: int
    ) -> Optional[Doubt]:
        """Atomically adjust the vote tally."""
        return await self._update_returning(
            doubt_id,
            upvotes=doubts_table.c.upvotes + up_delta,
            downvotes=doubts_table.c.downvotes + down_delta,
        )

    async def increment_answer_count(self, doubt_id: DoubtId) -> Optional[Doubt]:
        """Atomically increment the answer count by 1."""
        return await self._update_returning(
            doubt_id,
            answer_count=doubts_table.c.answer_count + 1,
            updated_at=func.now(),
        )

    async def set_solved(self, doubt_id: DoubtId, is_solved: bool) -> Optional[Doubt]:
        """Set the solved flag."""
        return await self._update_returning(
            doubt_id, is_solved=is_solved, updated_at=func.now()
        )
