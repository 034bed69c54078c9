"""Unit tests for SearchUseCase and SuggestUseCase."""

from datetime import datetime, timedelta

from unihub.application.usecase.search import (
    SearchRequest,
    SearchUseCase,
    SuggestRequest,
    SuggestUseCase,
)
from unihub.domain.repository import DoubtRepository, SearchRepository, UserRepository
from unihub.domain.service import DoubtService, EventService, NoteService, SearchService
from unihub.domain.value import SearchKind, UserRole
from tests.factories import seed_doubt, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSearch:
    """Tests for the federated search flow."""

    async def test_results_are_grouped_and_hydrated(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)
        user_repo = await unit_env.get(UserRepository)
        doubt_service = await unit_env.get(DoubtService)
        note_service = await unit_env.get(NoteService)
        event_service = await unit_env.get(EventService)
        student = await seed_user(user_repo, name="Asha")
        faculty = await seed_user(user_repo, name="Dr. Rao", role=UserRole.FACULTY)

        doubt = await doubt_service.create(
            "Binary Trees", "How do I balance one?", "DSA", 3, [], student.id
        )
        note = await note_service.create(
            "Graph notes", "Binary lifting explained", "DSA", 3, [], student.id
        )
        event = await event_service.create(
            faculty, "Binary bash", "Coding contest", datetime.now() + timedelta(days=2)
        )

        response = await use_case.execute(SearchRequest(q="binary"))

        assert response.query == "binary"
        assert response.degraded is False
        assert [d.doubt_id for d in response.results.doubts] == [str(doubt.id)]
        assert [n.note_id for n in response.results.notes] == [str(note.id)]
        assert [e.event_id for e in response.results.events] == [str(event.id)]
        assert response.results.events[0].created_by.name == "Dr. Rao"

    async def test_type_restricts_groups(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)
        user_repo = await unit_env.get(UserRepository)
        doubt_service = await unit_env.get(DoubtService)
        note_service = await unit_env.get(NoteService)
        student = await seed_user(user_repo)
        await doubt_service.create("Binary Trees", "Help", "DSA", 3, [], student.id)
        await note_service.create("Binary notes", "", "DSA", 3, [], student.id)

        response = await use_case.execute(SearchRequest(q="binary", type="notes"))

        assert len(response.results.notes) == 1
        assert response.results.doubts == []

    async def test_hits_without_source_are_dropped(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)
        doubt_repo = await unit_env.get(DoubtRepository)
        user_repo = await unit_env.get(UserRepository)
        search_service = await unit_env.get(SearchService)
        doubt = await seed_doubt(doubt_repo, await seed_user(user_repo))
        await search_service.index(doubt)
        await doubt_repo.delete(doubt.id)

        response = await use_case.execute(SearchRequest(q="binary"))

        assert response.results.doubts == []

    async def test_degraded_index(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)
        search_repo = await unit_env.get(SearchRepository)
        search_repo.available = False

        response = await use_case.execute(SearchRequest(q="binary"))

        assert response.degraded is True
        assert response.results.model_dump() == {"notes": [], "doubts": [], "events": []}

    def test_type_accepts_kind_values(self):
        assert SearchRequest(q="x", type="doubts").type is SearchKind.DOUBTS
        assert SearchRequest(q="x").type == "all"


class TestSuggest:
    """Tests for the suggestions flow."""

    async def test_suggestions(self, unit_env):
        use_case = await unit_env.get(SuggestUseCase)
        user_repo = await unit_env.get(UserRepository)
        doubt_service = await unit_env.get(DoubtService)
        student = await seed_user(user_repo)
        await doubt_service.create("Binary Trees", "Help", "DSA", 3, [], student.id)

        response = await use_case.execute(SuggestRequest(q="Bin"))

        assert response.suggestions == ["Binary Trees"]
