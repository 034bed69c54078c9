"""End-to-end tests for note and event endpoints."""

from datetime import datetime, timedelta
from uuid import uuid4

from unihub.domain.value import UserRole
from tests.harness import create_api_fixture

api = create_api_fixture()

NOTE = {
    "title": "OS unit 2",
    "description": "Scheduling and deadlocks",
    "subject": "OS",
    "semester": 4,
    "tags": ["scheduling"],
}


def _event(**overrides) -> dict:
    return {
        "title": "Hackathon",
        "description": "24 hours of building",
        "date": (datetime.now() + timedelta(days=7)).isoformat(),
        "location": "Main hall",
        **overrides,
    }


class TestNotes:
    """Tests for /notes."""

    async def test_share_and_fetch(self, api):
        user, headers = await api.login("Asha")

        created = await api.client.post("/notes", json=NOTE, headers=headers)
        fetched = await api.client.get(f"/notes/{created.json()['note_id']}")

        assert created.status_code == 201
        body = fetched.json()
        assert body["title"] == "OS unit 2"
        assert body["likes"] == 0
        assert body["uploaded_by"]["user_id"] == str(user.id)

    async def test_like_toggles(self, api):
        _, uploader = await api.login("Asha")
        _, fan = await api.login("Ravi")
        note_id = (await api.client.post("/notes", json=NOTE, headers=uploader)).json()[
            "note_id"
        ]

        liked = await api.client.post(f"/notes/{note_id}/like", headers=fan)
        fetched = await api.client.get(f"/notes/{note_id}", headers=fan)
        unliked = await api.client.post(f"/notes/{note_id}/like", headers=fan)

        assert liked.json() == {"likes": 1, "liked": True}
        assert fetched.json()["liked"] is True
        assert unliked.json() == {"likes": 0, "liked": False}

    async def test_list_with_filters_and_search(self, api):
        _, headers = await api.login("Asha")
        await api.client.post("/notes", json=NOTE, headers=headers)
        await api.client.post(
            "/notes",
            json={
                **NOTE,
                "title": "DBMS unit 3",
                "description": "Normal forms",
                "subject": "DBMS",
                "semester": 5,
            },
            headers=headers,
        )

        by_subject = await api.client.get("/notes", params={"subject": "OS"})
        by_search = await api.client.get("/notes", params={"search": "eadlock"})
        everything = await api.client.get("/notes", params={"limit": 1})

        assert [n["title"] for n in by_subject.json()["notes"]] == ["OS unit 2"]
        assert [n["title"] for n in by_search.json()["notes"]] == ["OS unit 2"]
        body = everything.json()
        assert (body["total"], body["total_pages"], body["current_page"]) == (2, 2, 1)
        assert len(body["notes"]) == 1

    async def test_list_marks_liked_notes(self, api):
        _, uploader = await api.login("Asha")
        _, fan = await api.login("Ravi")
        note_id = (await api.client.post("/notes", json=NOTE, headers=uploader)).json()[
            "note_id"
        ]
        await api.client.post(f"/notes/{note_id}/like", headers=fan)

        response = await api.client.get("/notes", headers=fan)

        [item] = response.json()["notes"]
        assert (item["likes"], item["liked"]) == (1, True)

    async def test_list_rejects_bad_page(self, api):
        response = await api.client.get("/notes", params={"page": 0})

        assert response.status_code == 422
        assert response.json()["field"] == "page"

    async def test_anonymous_like(self, api):
        _, uploader = await api.login()
        note_id = (await api.client.post("/notes", json=NOTE, headers=uploader)).json()[
            "note_id"
        ]

        response = await api.client.post(f"/notes/{note_id}/like")

        assert response.status_code == 401

    async def test_invalid_semester(self, api):
        _, headers = await api.login()

        response = await api.client.post(
            "/notes", json={**NOTE, "semester": 0}, headers=headers
        )

        assert response.status_code == 422
        assert response.json()["field"] == "semester"
        assert response.json()["message"] == "must be between 1 and 8"
        assert response.json()["detail"] == response.json()["message"]

    async def test_delete_permissions(self, api):
        _, uploader = await api.login("Asha")
        _, stranger = await api.login("Ravi")
        note_id = (await api.client.post("/notes", json=NOTE, headers=uploader)).json()[
            "note_id"
        ]

        refused = await api.client.delete(f"/notes/{note_id}", headers=stranger)
        deleted = await api.client.delete(f"/notes/{note_id}", headers=uploader)
        missing = await api.client.get(f"/notes/{note_id}")

        assert refused.status_code == 403
        assert deleted.status_code == 200
        assert missing.status_code == 404


class TestEvents:
    """Tests for /events."""

    async def test_faculty_announces_event(self, api):
        faculty, headers = await api.login("Dr. Rao", UserRole.FACULTY)

        created = await api.client.post("/events", json=_event(), headers=headers)
        fetched = await api.client.get(f"/events/{created.json()['event_id']}")

        assert created.status_code == 201
        assert fetched.json()["created_by"]["name"] == "Dr. Rao"
        assert fetched.json()["location"] == "Main hall"

    async def test_upcoming_events_soonest_first(self, api):
        _, headers = await api.login("Dr. Rao", UserRole.FACULTY)
        now = datetime.now()
        past = _event(title="Orientation", date=(now - timedelta(days=30)).isoformat())
        later = _event(title="Fest", date=(now + timedelta(days=14)).isoformat())
        sooner = _event(title="Seminar", date=(now + timedelta(days=2)).isoformat())
        for payload in (past, later, sooner):
            await api.client.post("/events", json=payload, headers=headers)

        upcoming = await api.client.get(
            "/events", params={"upcoming": "true", "limit": 20}
        )
        everything = await api.client.get("/events")

        assert [e["title"] for e in upcoming.json()["events"]] == ["Seminar", "Fest"]
        assert upcoming.json()["total"] == 2
        assert [e["title"] for e in everything.json()["events"]] == [
            "Orientation",
            "Seminar",
            "Fest",
        ]
        assert everything.json()["events"][0]["created_by"]["name"] == "Dr. Rao"

    async def test_student_cannot_announce(self, api):
        _, headers = await api.login()

        response = await api.client.post("/events", json=_event(), headers=headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    async def test_blank_description(self, api):
        _, headers = await api.login("Dr. Rao", UserRole.FACULTY)

        response = await api.client.post(
            "/events", json=_event(description=""), headers=headers
        )

        assert response.status_code == 422
        assert response.json()["field"] == "description"

    async def test_missing_date(self, api):
        _, headers = await api.login("Dr. Rao", UserRole.FACULTY)
        payload = _event()
        del payload["date"]

        response = await api.client.post("/events", json=payload, headers=headers)

        assert response.status_code == 422

    async def test_unknown_event(self, api):
        response = await api.client.get(f"/events/{uuid4()}")

        assert response.status_code == 404

    async def test_delete_event(self, api):
        _, headers = await api.login("Dr. Rao", UserRole.FACULTY)
        event_id = (await api.client.post("/events", json=_event(), headers=headers)).json()[
            "event_id"
        ]

        response = await api.client.delete(f"/events/{event_id}", headers=headers)

        assert response.status_code == 200
        assert (await api.client.get(f"/events/{event_id}")).status_code == 404
