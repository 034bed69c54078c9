"""Unit tests for in-memory repository behaviour the services rely on."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from unihub.domain.model import SearchDocument, Vote
from unihub.domain.value import SearchKind, UserId, VotableType, VoteDirection, VoteId
from unihub.persistence.repository.inmemory import (
    InMemorySearchRepository,
    InMemoryVoteRepository,
)


def _vote(user_id, votable_id, votable_type=VotableType.DOUBT):
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        votable_type=votable_type,
        votable_id=votable_id,
        direction=VoteDirection.UP,
    )


class TestInMemoryVoteRepository:
    """Unit tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_second_vote_by_same_user_is_rejected(self):
        """Mirrors the unique (user, votable) constraint of the votes table."""
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()
        await repo.save(_vote(user_id, votable_id))

        with pytest.raises(IntegrityError):
            await repo.save(_vote(user_id, votable_id))

    @pytest.mark.asyncio
    async def test_same_id_under_another_type_is_separate(self):
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()

        await repo.save(_vote(user_id, votable_id, VotableType.DOUBT))
        await repo.save(_vote(user_id, votable_id, VotableType.ANSWER))

        assert await repo.find_by_user_and_votable(
            user_id, VotableType.ANSWER, votable_id
        )

    @pytest.mark.asyncio
    async def test_delete_by_votables_counts_removed(self):
        repo = InMemoryVoteRepository()
        doomed, kept = uuid4(), uuid4()
        await repo.save(_vote(UserId(uuid4()), doomed))
        await repo.save(_vote(UserId(uuid4()), doomed))
        await repo.save(_vote(UserId(uuid4()), kept))

        removed = await repo.delete_by_votables(VotableType.DOUBT, [doomed])

        assert removed == 2


class TestInMemorySearchRepository:
    """Unit tests for InMemorySearchRepository."""

    @pytest.mark.asyncio
    async def test_candidates_need_every_fragment(self):
        repo = InMemorySearchRepository()
        both = SearchDocument(kind=SearchKind.NOTES, source_id=uuid4(), title="x")
        one = SearchDocument(kind=SearchKind.NOTES, source_id=uuid4(), title="y")
        await repo.save(both, {"binary", "trees"})
        await repo.save(one, {"binary"})

        candidates = await repo.find_candidates(["nar", "ree"])

        assert [d.source_id for d in candidates] == [both.source_id]

    @pytest.mark.asyncio
    async def test_no_fragments_returns_every_document(self):
        repo = InMemorySearchRepository()
        note = SearchDocument(kind=SearchKind.NOTES, source_id=uuid4(), title="x")
        await repo.save(note, {"binary"})

        assert await repo.find_candidates([]) == [note]

    @pytest.mark.asyncio
    async def test_titles_by_prefix_newest_first(self):
        repo = InMemorySearchRepository()
        now = datetime.now()
        for title, age in [("Binary Trees", 2), ("binary search", 1), ("Graphs", 0)]:
            document = SearchDocument(
                kind=SearchKind.DOUBTS,
                source_id=uuid4(),
                title=title,
                created_at=now - timedelta(hours=age),
            )
            await repo.save(document, set())

        titles = await repo.find_titles_by_prefix("BIN", limit=5)

        assert titles == ["binary search", "Binary Trees"]
