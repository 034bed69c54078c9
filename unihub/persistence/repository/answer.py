"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from unihub.domain.model import Answer
from unihub.domain.repository import AnswerRepository
from unihub.domain.value import AnswerId, DoubtId
from unihub.persistence.mappers import answer_to_dict, row_to_answer
from unihub.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_doubt(self, doubt_id: DoubtId) -> List[Answer]:
        """Find all answers of a doubt ordered by position."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.doubt_id == doubt_id)
            .order_by(answers_table.c.position)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create)."""
        stmt = answers_table.insert().values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def apply_vote_delta(
        self, answer_id: AnswerId, up_delta: int, down_delta: int
    ) -> Optional[Answer]:
        """Atomically adjust the vote tally of an answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(
                upvotes=answers_table.c.upvotes + up_delta,
                downvotes=answers_table.c.downvotes + down_delta,
            )
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_answer(dict(row)) if row else None

    async def delete_by_doubt(self, doubt_id: DoubtId) -> int:
        """Delete every answer of a doubt."""
        stmt = delete(answers_table).where(answers_table.c.doubt_id == doubt_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
