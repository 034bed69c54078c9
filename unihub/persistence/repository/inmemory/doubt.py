"""In-memory doubt repository for testing."""

from typing import Optional, Sequence

from unihub.domain.model import Doubt
from unihub.domain.repository import DoubtFilter, DoubtRepository
from unihub.domain.value import DoubtId


def _matches(doubt: Doubt, doubt_filter: DoubtFilter) -> bool:
    if doubt_filter.semester is not None and doubt.semester != doubt_filter.semester:
        return False
    if doubt_filter.subject is not None and doubt.subject != doubt_filter.subject:
        return False
    if doubt_filter.solved is not None and doubt.is_solved != doubt_filter.solved:
        return False

    tokens = doubt_filter.search_tokens
    if tokens:
        fields = [doubt.title, doubt.content, doubt.subject, " ".join(doubt.tags)]
        if not any(all(t in field.lower() for t in tokens) for field in fields):
            return False
    return True


class InMemoryDoubtRepository(DoubtRepository):
    """In-memory implementation of DoubtRepository for testing.

    Row locks are a no-op: tests run on a single event loop.
    """

    def __init__(self) -> None:
        self._doubts: dict[DoubtId, Doubt] = {}

    async def find_by_id(
        self, doubt_id: DoubtId, for_update: bool = False
    ) -> Optional[Doubt]:
        """Find a doubt by ID."""
        return self._doubts.get(doubt_id)

    async def find_by_ids(self, doubt_ids: Sequence[DoubtId]) -> list[Doubt]:
        """Find several doubts at once."""
        return [self._doubts[i] for i in doubt_ids if i in self._doubts]

    async def find_all(
        self,
        doubt_filter: DoubtFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Doubt]:
        """Find doubts with filtering and pagination, newest first."""
        doubts = [d for d in self._doubts.values() if _matches(d, doubt_filter)]
        doubts.sort(key=lambda d: (d.created_at, d.id), reverse=True)
        return doubts[offset : offset + limit]

    async def count(self, doubt_filter: DoubtFilter) -> int:
        """Count doubts matching the filter."""
        return sum(1 for d in self._doubts.values() if _matches(d, doubt_filter))

    async def save(self, doubt: Doubt) -> Doubt:
        """Save a doubt."""
        self._doubts[doubt.id] = doubt
        return doubt

    async def delete(self, doubt_id: DoubtId) -> None:
        """Hard delete a doubt."""
        self._doubts.pop(doubt_id, None)

    def _update(self, doubt_id: DoubtId, **changes) -> Optional[Doubt]:
        doubt = self._doubts.get(doubt_id)
        if doubt is None:
            return None
        updated = doubt.model_copy(update=changes)
        self._doubts[doubt_id] = updated
        return updated

    async def apply_vote_delta(
        self, doubt_id: DoubtId, up_delta: int, down_delta: int
    ) -> Optional[Doubt]:
        """Adjust the vote tally."""
        doubt = self._doubts.get(doubt_id)
        if doubt is None:
            return None
        return self._update(
            doubt_id,
            upvotes=doubt.upvotes + up_delta,
            downvotes=doubt.downvotes + down_delta,
        )

    async def increment_answer_count(self, doubt_id: DoubtId) -> Optional[Doubt]:
        """Increment the answer count by 1."""
        doubt = self._doubts.get(doubt_id)
        if doubt is None:
            return None
        return self._update(doubt_id, answer_count=doubt.answer_count + 1)

    async def set_solved(self, doubt_id: DoubtId, is_solved: bool) -> Optional[Doubt]:
        """Set the solved flag."""
        return self._update(doubt_id, is_solved=is_solved)
