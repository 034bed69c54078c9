"""End-to-end tests for doubt and answer endpoints."""

from uuid import uuid4

import pytest

from unihub.domain.value import UserRole
from tests.harness import create_api_fixture

api = create_api_fixture()

DOUBT = {
    "title": "Binary Trees",
    "content": "How do I balance a binary tree?",
    "subject": "DSA",
    "semester": 3,
    "tags": ["trees"],
}


async def _ask(api, headers, **overrides) -> dict:
    response = await api.client.post("/doubts", json={**DOUBT, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAndList:
    """Creating and listing doubts."""

    async def test_scenario_subject_filter(self, api):
        """A DSA doubt is listed under DSA and not under OS."""
        _, headers = await api.login()
        doubt = await _ask(api, headers)

        dsa = await api.client.get("/doubts", params={"subject": "DSA"})
        os_ = await api.client.get("/doubts", params={"subject": "OS"})

        assert [d["doubt_id"] for d in dsa.json()["doubts"]] == [doubt["doubt_id"]]
        assert os_.json()["doubts"] == []

    async def test_created_doubt_shape(self, api):
        user, headers = await api.login("Asha")

        doubt = await _ask(api, headers)

        assert doubt["is_solved"] is False
        assert (doubt["upvotes"], doubt["downvotes"], doubt["answer_count"]) == (0, 0, 0)
        assert doubt["asked_by"] == {
            "user_id": str(user.id),
            "name": "Asha",
            "role": "Student",
        }

    async def test_tags_as_comma_separated_string(self, api):
        _, headers = await api.login()

        doubt = await _ask(api, headers, tags="trees, avl,,recursion ")

        assert doubt["tags"] == ["trees", "avl", "recursion"]

    @pytest.mark.parametrize("semester", [1, 8])
    async def test_semester_bounds_accepted(self, api, semester):
        _, headers = await api.login()

        doubt = await _ask(api, headers, semester=semester)

        assert doubt["semester"] == semester

    @pytest.mark.parametrize("semester", [0, 9])
    async def test_semester_out_of_range(self, api, semester):
        _, headers = await api.login()

        response = await api.client.post(
            "/doubts", json={**DOUBT, "semester": semester}, headers=headers
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["field"] == "semester"

    async def test_blank_title_reports_title(self, api):
        _, headers = await api.login()

        response = await api.client.post(
            "/doubts", json={**DOUBT, "title": " ", "content": ""}, headers=headers
        )

        assert response.status_code == 422
        assert response.json()["field"] == "title"

    async def test_create_requires_authentication(self, api):
        response = await api.client.post("/doubts", json=DOUBT)

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"

    async def test_invalid_token_is_rejected(self, api):
        response = await api.client.post(
            "/doubts", json=DOUBT, headers={"Authorization": "Bearer nope"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"
        assert response.json()["message"]

    async def test_token_in_cookie(self, api):
        _, headers = await api.login()
        token = headers["Authorization"].removeprefix("Bearer ")
        api.client.cookies.set("auth_token", token)

        response = await api.client.post("/doubts", json=DOUBT)

        assert response.status_code == 201

    async def test_search_and_pagination(self, api):
        _, headers = await api.login()
        for title in ["AVL rotations", "Heap sort", "AVL height"]:
            await _ask(api, headers, title=title)

        found = await api.client.get("/doubts", params={"search": "avl", "limit": 1})

        body = found.json()
        assert body["total"] == 2
        assert body["total_pages"] == 2
        assert [d["title"] for d in body["doubts"]] == ["AVL height"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
    async def test_paging_out_of_range(self, api, params):
        response = await api.client.get("/doubts", params=params)

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"


class TestGetAndDelete:
    """Fetching and deleting doubts."""

    async def test_unknown_doubt(self, api):
        response = await api.client.get(f"/doubts/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    async def test_malformed_id(self, api):
        response = await api.client.get("/doubts/not-a-uuid")

        assert response.status_code == 422

    async def test_get_includes_answers(self, api):
        _, headers = await api.login()
        doubt = await _ask(api, headers)
        await api.client.post(
            f"/doubts/{doubt['doubt_id']}/answer", json={"content": "a1"}, headers=headers
        )

        response = await api.client.get(f"/doubts/{doubt['doubt_id']}")

        assert response.status_code == 200
        assert [a["content"] for a in response.json()["answers"]] == ["a1"]
        assert response.json()["answer_count"] == 1

    async def test_delete_by_stranger_is_forbidden(self, api):
        _, asker = await api.login("Asha")
        _, stranger = await api.login("Ravi")
        doubt = await _ask(api, asker)

        response = await api.client.delete(f"/doubts/{doubt['doubt_id']}", headers=stranger)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    async def test_faculty_deletes_and_search_forgets(self, api):
        """Scenario: a deleted doubt drops out of search."""
        _, asker = await api.login("Asha")
        _, faculty = await api.login("Dr. Rao", UserRole.FACULTY)
        doubt = await _ask(api, asker)

        before = await api.client.get("/search", params={"q": "binary"})
        deleted = await api.client.delete(f"/doubts/{doubt['doubt_id']}", headers=faculty)
        after = await api.client.get("/search", params={"q": "binary"})

        assert [d["doubt_id"] for d in before.json()["results"]["doubts"]] == [
            doubt["doubt_id"]
        ]
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True
        assert after.json()["results"]["doubts"] == []
        assert (await api.client.get(f"/doubts/{doubt['doubt_id']}")).status_code == 404


class TestVoting:
    """Voting on doubts and answers."""

    async def test_scenario_upvote_toggle_downvote(self, api):
        _, asker = await api.login("Asha")
        _, voter = await api.login("Ravi")
        doubt = await _ask(api, asker)
        url = f"/doubts/{doubt['doubt_id']}/vote"

        first = await api.client.post(url, json={"type": "upvote"}, headers=voter)
        second = await api.client.post(url, json={"type": "upvote"}, headers=voter)
        third = await api.client.post(url, json={"type": "downvote"}, headers=voter)

        assert first.json() == {"upvotes": 1, "downvotes": 0, "user_vote": "up"}
        assert second.json() == {"upvotes": 0, "downvotes": 0, "user_vote": None}
        assert third.json() == {"upvotes": 0, "downvotes": 1, "user_vote": "down"}

    async def test_listing_shows_callers_vote(self, api):
        _, asker = await api.login("Asha")
        _, voter = await api.login("Ravi")
        doubt = await _ask(api, asker)
        await api.client.post(
            f"/doubts/{doubt['doubt_id']}/vote", json={"type": "upvote"}, headers=voter
        )

        as_voter = await api.client.get("/doubts", headers=voter)
        as_asker = await api.client.get("/doubts", headers=asker)

        assert as_voter.json()["doubts"][0]["user_vote"] == "up"
        assert as_asker.json()["doubts"][0]["user_vote"] is None

    async def test_anonymous_vote(self, api):
        _, asker = await api.login()
        doubt = await _ask(api, asker)

        response = await api.client.post(
            f"/doubts/{doubt['doubt_id']}/vote", json={"type": "upvote"}
        )

        assert response.status_code == 401

    async def test_unknown_vote_type(self, api):
        _, asker = await api.login()
        doubt = await _ask(api, asker)

        response = await api.client.post(
            f"/doubts/{doubt['doubt_id']}/vote", json={"type": "sideways"}, headers=asker
        )

        assert response.status_code == 422

    async def test_vote_on_answer(self, api):
        _, asker = await api.login("Asha")
        _, voter = await api.login("Ravi")
        doubt = await _ask(api, asker)
        answer = (
            await api.client.post(
                f"/doubts/{doubt['doubt_id']}/answer", json={"content": "a1"}, headers=asker
            )
        ).json()

        response = await api.client.post(
            f"/doubts/{doubt['doubt_id']}/answer/{answer['answer_id']}/vote",
            json={"type": "downvote"},
            headers=voter,
        )

        assert response.json() == {"upvotes": 0, "downvotes": 1, "user_vote": "down"}

    async def test_vote_on_answer_of_other_doubt(self, api):
        _, asker = await api.login()
        first = await _ask(api, asker)
        second = await _ask(api, asker, title="Graphs")
        answer = (
            await api.client.post(
                f"/doubts/{first['doubt_id']}/answer", json={"content": "a1"}, headers=asker
            )
        ).json()

        response = await api.client.post(
            f"/doubts/{second['doubt_id']}/answer/{answer['answer_id']}/vote",
            json={"type": "upvote"},
            headers=asker,
        )

        assert response.status_code == 404


class TestSolveAndAnswers:
    """Solving doubts and answering them."""

    async def test_scenario_only_asker_solves(self, api):
        _, asker = await api.login("Asha")
        _, other = await api.login("Ravi")
        doubt = await _ask(api, asker)
        url = f"/doubts/{doubt['doubt_id']}/solve"

        refused = await api.client.patch(url, headers=other)
        unchanged = await api.client.get(f"/doubts/{doubt['doubt_id']}")
        solved = await api.client.patch(url, headers=asker)

        assert refused.status_code == 403
        assert unchanged.json()["is_solved"] is False
        assert solved.json() == {"doubt_id": doubt["doubt_id"], "is_solved": True}

    async def test_solved_filter(self, api):
        _, asker = await api.login()
        solved = await _ask(api, asker, title="Solved one")
        await _ask(api, asker, title="Open one")
        await api.client.patch(f"/doubts/{solved['doubt_id']}/solve", headers=asker)

        response = await api.client.get("/doubts", params={"solved": "true"})

        assert [d["title"] for d in response.json()["doubts"]] == ["Solved one"]

    async def test_scenario_answers_in_posting_order(self, api):
        _, asker = await api.login("Asha")
        _, helper = await api.login("Ravi")
        doubt = await _ask(api, asker)
        url = f"/doubts/{doubt['doubt_id']}/answer"

        await api.client.post(url, json={"content": "a1"}, headers=helper)
        await api.client.post(url, json={"content": "a2"}, headers=asker)
        response = await api.client.get(f"/doubts/{doubt['doubt_id']}/answers")

        answers = response.json()["answers"]
        assert [a["content"] for a in answers] == ["a1", "a2"]
        assert [a["author"]["name"] for a in answers] == ["Ravi", "Asha"]

    async def test_answer_requires_authentication(self, api):
        _, asker = await api.login()
        doubt = await _ask(api, asker)

        response = await api.client.post(
            f"/doubts/{doubt['doubt_id']}/answer", json={"content": "a1"}
        )

        assert response.status_code == 401

    async def test_blank_answer(self, api):
        _, asker = await api.login()
        doubt = await _ask(api, asker)

        response = await api.client.post(
            f"/doubts/{doubt['doubt_id']}/answer", json={"content": "  "}, headers=asker
        )

        assert response.status_code == 422
        assert response.json()["field"] == "content"

    async def test_answers_of_unknown_doubt(self, api):
        response = await api.client.get(f"/doubts/{uuid4()}/answers")

        assert response.status_code == 404
