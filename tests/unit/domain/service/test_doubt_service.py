"""Unit tests for DoubtService."""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest

from unihub.domain.error import ForbiddenError, NotFoundError, ValidationError
from unihub.domain.repository import (
    AnswerRepository,
    DoubtFilter,
    DoubtRepository,
    SearchRepository,
    UserRepository,
    VoteRepository,
)
from unihub.domain.service import DoubtService, SearchService, VoteLedger
from unihub.domain.value import (
    DoubtId,
    SearchKind,
    UserId,
    UserRole,
    VotableType,
    VoteDirection,
)
from tests.factories import make_user, seed_doubt, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

VALID = {
    "title": "Binary Trees",
    "content": "How do I balance one?",
    "subject": "DSA",
    "semester": 3,
    "tags": ["trees"],
}


class TestCreate:
    """Tests for create."""

    async def test_create_starts_unsolved_and_empty(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        asker_id = UserId(uuid4())

        doubt = await doubt_service.create(**VALID, asked_by_id=asker_id)

        assert doubt.is_solved is False
        assert (doubt.upvotes, doubt.downvotes, doubt.answer_count) == (0, 0, 0)
        assert doubt.asked_by_id == asker_id
        assert doubt.tags == ["trees"]

    async def test_create_trims_title_and_subject(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)

        doubt = await doubt_service.create(
            **{**VALID, "title": "  Binary Trees ", "subject": " DSA  "},
            asked_by_id=UserId(uuid4()),
        )

        assert doubt.title == "Binary Trees"
        assert doubt.subject == "DSA"

    async def test_create_indexes_the_doubt(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        search_repo = await unit_env.get(SearchRepository)

        doubt = await doubt_service.create(**VALID, asked_by_id=UserId(uuid4()))

        candidates = await search_repo.find_candidates(["binary"], SearchKind.DOUBTS)
        assert [d.source_id for d in candidates] == [doubt.id]

    @pytest.mark.parametrize("semester", [1, 8])
    async def test_semester_bounds_are_accepted(self, unit_env, semester):
        doubt_service = await unit_env.get(DoubtService)

        doubt = await doubt_service.create(
            **{**VALID, "semester": semester}, asked_by_id=UserId(uuid4())
        )

        assert doubt.semester == semester

    @pytest.mark.parametrize("semester", [0, 9, -1, True, "3", None])
    async def test_invalid_semester_is_rejected(self, unit_env, semester):
        doubt_service = await unit_env.get(DoubtService)

        with pytest.raises(ValidationError) as exc_info:
            await doubt_service.create(
                **{**VALID, "semester": semester}, asked_by_id=UserId(uuid4())
            )

        assert exc_info.value.field == "semester"

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"title": "  "}, "title"),
            ({"title": "", "content": ""}, "title"),
            ({"content": "", "subject": "", "semester": 0}, "content"),
            ({"subject": "   ", "semester": 99}, "subject"),
            ({"title": "x" * 301}, "title"),
        ],
    )
    async def test_first_invalid_field_is_reported(self, unit_env, overrides, field):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)

        with pytest.raises(ValidationError) as exc_info:
            await doubt_service.create(
                **{**VALID, **overrides}, asked_by_id=UserId(uuid4())
            )

        assert exc_info.value.field == field
        assert await doubt_repo.count(DoubtFilter()) == 0


class TestListDoubts:
    """Tests for list_doubts."""

    async def test_filters_combine(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker = make_user()

        wanted = await seed_doubt(doubt_repo, asker, subject="DSA", semester=3)
        await seed_doubt(doubt_repo, asker, subject="DSA", semester=4)
        await seed_doubt(doubt_repo, asker, subject="OS", semester=3)

        page = await doubt_service.list_doubts(DoubtFilter(subject="DSA", semester=3))

        assert [d.id for d in page.doubts] == [wanted.id]
        assert page.total == 1

    async def test_subject_match_is_exact(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        await seed_doubt(doubt_repo, make_user(), subject="DSA")

        page = await doubt_service.list_doubts(DoubtFilter(subject="dsa"))

        assert page.total == 0

    async def test_solved_filter(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker = make_user()
        solved = await seed_doubt(doubt_repo, asker)
        await doubt_repo.set_solved(solved.id, True)
        open_doubt = await seed_doubt(doubt_repo, asker)

        solved_page = await doubt_service.list_doubts(DoubtFilter(solved=True))
        open_page = await doubt_service.list_doubts(DoubtFilter(solved=False))

        assert [d.id for d in solved_page.doubts] == [solved.id]
        assert [d.id for d in open_page.doubts] == [open_doubt.id]

    async def test_search_text_needs_every_word_in_one_field(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker = make_user()

        in_title = await seed_doubt(
            doubt_repo, asker, title="Balancing AVL trees", content="Help"
        )
        await seed_doubt(
            doubt_repo, asker, title="Balancing act", content="red-black trees"
        )
        in_tags = await seed_doubt(
            doubt_repo,
            asker,
            title="Rotations",
            content="Help",
            tags=["avl", "trees"],
            age=timedelta(minutes=5),
        )

        page = await doubt_service.list_doubts(DoubtFilter(search_text="avl TREES"))

        assert [d.id for d in page.doubts] == [in_title.id, in_tags.id]

    async def test_listing_and_search_agree_on_mid_word_text(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        search_service = await unit_env.get(SearchService)

        doubt = await doubt_service.create(
            **{**VALID, "title": "Subtrees and heaps", "tags": []},
            asked_by_id=UserId(uuid4()),
        )

        page = await doubt_service.list_doubts(DoubtFilter(search_text="tree"))
        results = await search_service.query("tree", SearchKind.DOUBTS)

        assert [d.id for d in page.doubts] == [doubt.id]
        assert [hit.document.source_id for hit in results.hits] == [doubt.id]

    async def test_newest_first_with_pagination(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker = make_user()
        doubts = [
            await seed_doubt(doubt_repo, asker, title=f"Doubt {i}", age=timedelta(hours=i))
            for i in range(5)
        ]

        first = await doubt_service.list_doubts(DoubtFilter(), page=1, page_size=2)
        last = await doubt_service.list_doubts(DoubtFilter(), page=3, page_size=2)

        assert [d.id for d in first.doubts] == [doubts[0].id, doubts[1].id]
        assert [d.id for d in last.doubts] == [doubts[4].id]
        assert (first.total, first.total_pages) == (5, 3)

    async def test_page_past_the_end_is_empty(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        await seed_doubt(doubt_repo, make_user())

        page = await doubt_service.list_doubts(DoubtFilter(), page=4)

        assert page.doubts == []
        assert page.total == 1

    @pytest.mark.parametrize(
        "page, page_size, field", [(0, 10, "page"), (1, 0, "limit"), (1, 101, "limit")]
    )
    async def test_out_of_range_paging_is_rejected(
        self, unit_env, page, page_size, field
    ):
        doubt_service = await unit_env.get(DoubtService)

        with pytest.raises(ValidationError) as exc_info:
            await doubt_service.list_doubts(DoubtFilter(), page=page, page_size=page_size)

        assert exc_info.value.field == field


class TestVote:
    """Tests for vote."""

    async def test_scenario_upvote_toggle_then_downvote(self, unit_env):
        """Upvote, upvote again (withdrawn), then downvote."""
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        doubt = await seed_doubt(doubt_repo, make_user())
        voter = UserId(uuid4())

        first = await doubt_service.vote(doubt.id, voter, VoteDirection.UP)
        second = await doubt_service.vote(doubt.id, voter, VoteDirection.UP)
        third = await doubt_service.vote(doubt.id, voter, VoteDirection.DOWN)

        assert (first.upvotes, first.downvotes, first.user_vote) == (1, 0, VoteDirection.UP)
        assert (second.upvotes, second.downvotes, second.user_vote) == (0, 0, None)
        assert (third.upvotes, third.downvotes, third.user_vote) == (
            0,
            1,
            VoteDirection.DOWN,
        )

    async def test_tally_counts_every_voter(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        doubt = await seed_doubt(doubt_repo, make_user())

        for _ in range(3):
            await doubt_service.vote(doubt.id, UserId(uuid4()), VoteDirection.UP)
        await doubt_service.vote(doubt.id, UserId(uuid4()), VoteDirection.DOWN)

        stored = await doubt_repo.find_by_id(doubt.id)
        assert (stored.upvotes, stored.downvotes) == (3, 1)

    async def test_concurrent_votes_and_answers_are_all_counted(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        doubt = await seed_doubt(doubt_repo, make_user())

        up, down, first, second = await asyncio.gather(
            doubt_service.vote(doubt.id, UserId(uuid4()), VoteDirection.UP),
            doubt_service.vote(doubt.id, UserId(uuid4()), VoteDirection.DOWN),
            doubt_service.post_answer(doubt.id, UserId(uuid4()), "Rotate left"),
            doubt_service.post_answer(doubt.id, UserId(uuid4()), "Rotate right"),
        )

        stored = await doubt_repo.find_by_id(doubt.id)
        assert (stored.upvotes, stored.downvotes) == (1, 1)
        assert stored.answer_count == 2
        assert (up.user_vote, down.user_vote) == (VoteDirection.UP, VoteDirection.DOWN)
        assert sorted([first.position, second.position]) == [0, 1]
        answers = await answer_repo.find_by_doubt(doubt.id)
        assert [a.position for a in answers] == [0, 1]

    async def test_vote_on_missing_doubt(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)

        with pytest.raises(NotFoundError):
            await doubt_service.vote(DoubtId(uuid4()), UserId(uuid4()), VoteDirection.UP)


class TestToggleSolved:
    """Tests for toggle_solved."""

    async def test_scenario_only_asker_toggles(self, unit_env):
        """A non-asker is refused and nothing changes; the asker flips the flag."""
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker, other = make_user("A"), make_user("B")
        doubt = await seed_doubt(doubt_repo, asker)

        with pytest.raises(ForbiddenError):
            await doubt_service.toggle_solved(doubt.id, other)
        assert (await doubt_repo.find_by_id(doubt.id)).is_solved is False

        assert await doubt_service.toggle_solved(doubt.id, asker) is True
        assert (await doubt_repo.find_by_id(doubt.id)).is_solved is True

    async def test_toggle_twice_reopens(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        asker = make_user()
        doubt = await seed_doubt(doubt_repo, asker)

        await doubt_service.toggle_solved(doubt.id, asker)

        assert await doubt_service.toggle_solved(doubt.id, asker) is False

    async def test_faculty_cannot_toggle_someone_elses_doubt(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        doubt = await seed_doubt(doubt_repo, make_user())

        with pytest.raises(ForbiddenError):
            await doubt_service.toggle_solved(
                doubt.id, make_user(role=UserRole.FACULTY)
            )


class TestDelete:
    """Tests for delete."""

    async def test_delete_cascades(self, unit_env):
        """Deleting removes answers, votes on doubt and answers, and the search document."""
        doubt_service = await unit_env.get(DoubtService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        search_repo = await unit_env.get(SearchRepository)
        ledger = await unit_env.get(VoteLedger)

        asker = await seed_user(user_repo)
        voter = UserId(uuid4())
        doubt = await doubt_service.create(**VALID, asked_by_id=asker.id)
        answer = await doubt_service.post_answer(doubt.id, voter, "Rotate left")
        await doubt_service.vote(doubt.id, voter, VoteDirection.UP)
        await ledger.cast_vote(VotableType.ANSWER, answer.id, voter, VoteDirection.UP)

        await doubt_service.delete(doubt.id, asker)

        with pytest.raises(NotFoundError):
            await doubt_service.get(doubt.id)
        assert await answer_repo.find_by_doubt(doubt.id) == []
        assert (
            await vote_repo.find_by_user_and_votable(voter, VotableType.DOUBT, doubt.id)
            is None
        )
        assert (
            await vote_repo.find_by_user_and_votable(
                voter, VotableType.ANSWER, answer.id
            )
            is None
        )
        assert await search_repo.find_candidates(["binary"]) == []

    async def test_stranger_cannot_delete(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        doubt = await seed_doubt(doubt_repo, make_user())

        with pytest.raises(ForbiddenError):
            await doubt_service.delete(doubt.id, make_user())
        assert await doubt_repo.find_by_id(doubt.id) is not None

    async def test_faculty_can_delete(self, unit_env):
        doubt_service = await unit_env.get(DoubtService)
        doubt_repo = await unit_env.get(DoubtRepository)
        doubt = await seed_doubt(doubt_repo, make_user())

        await doubt_service.delete(doubt.id, make_user(role=UserRole.FACULTY))

        assert await doubt_repo.find_by_id(doubt.id) is None
