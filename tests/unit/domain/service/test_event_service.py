"""Unit tests for EventService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from unihub.domain.error import ForbiddenError, NotFoundError, ValidationError
from unihub.domain.repository import EventFilter
from unihub.domain.service import EventService, SearchService
from unihub.domain.value import EventId, SearchKind, UserRole
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

NEXT_WEEK = datetime.now() + timedelta(days=7)


class TestCreate:
    """Tests for create."""

    async def test_faculty_creates_event(self, unit_env):
        event_service = await unit_env.get(EventService)
        search_service = await unit_env.get(SearchService)
        faculty = make_user("Dr. Rao", role=UserRole.FACULTY)

        event = await event_service.create(
            faculty, "Hackathon", "24 hours of building", NEXT_WEEK, " Main hall "
        )

        assert event.created_by_id == faculty.id
        assert event.location == "Main hall"
        results = await search_service.query("hackathon", SearchKind.EVENTS)
        assert [hit.document.source_id for hit in results.hits] == [event.id]

    async def test_student_cannot_create_event(self, unit_env):
        event_service = await unit_env.get(EventService)

        with pytest.raises(ForbiddenError):
            await event_service.create(
                make_user(), "Hackathon", "24 hours of building", NEXT_WEEK
            )

    async def test_blank_location_is_dropped(self, unit_env):
        event_service = await unit_env.get(EventService)

        event = await event_service.create(
            make_user(role=UserRole.FACULTY), "Seminar", "On compilers", NEXT_WEEK, "  "
        )

        assert event.location is None

    @pytest.mark.parametrize(
        "title, description, date, field",
        [
            ("", "On compilers", NEXT_WEEK, "title"),
            ("Seminar", "  ", NEXT_WEEK, "description"),
            ("Seminar", "On compilers", None, "date"),
        ],
    )
    async def test_invalid_fields(self, unit_env, title, description, date, field):
        event_service = await unit_env.get(EventService)

        with pytest.raises(ValidationError) as exc_info:
            await event_service.create(
                make_user(role=UserRole.FACULTY), title, description, date
            )

        assert exc_info.value.field == field


class TestGetAndDelete:
    """Tests for get, get_many and delete."""

    async def test_get_many_keeps_order_and_skips_missing(self, unit_env):
        event_service = await unit_env.get(EventService)
        faculty = make_user(role=UserRole.FACULTY)
        first = await event_service.create(faculty, "Fest", "Cultural fest", NEXT_WEEK)
        second = await event_service.create(faculty, "Talk", "Guest talk", NEXT_WEEK)

        events = await event_service.get_many([second.id, EventId(uuid4()), first.id])

        assert [e.id for e in events] == [second.id, first.id]

    async def test_delete_by_another_faculty(self, unit_env):
        event_service = await unit_env.get(EventService)
        event = await event_service.create(
            make_user(role=UserRole.FACULTY), "Fest", "Cultural fest", NEXT_WEEK
        )

        await event_service.delete(event.id, make_user(role=UserRole.FACULTY))

        with pytest.raises(NotFoundError):
            await event_service.get(event.id)

    async def test_student_cannot_delete(self, unit_env):
        event_service = await unit_env.get(EventService)
        event = await event_service.create(
            make_user(role=UserRole.FACULTY), "Fest", "Cultural fest", NEXT_WEEK
        )

        with pytest.raises(ForbiddenError):
            await event_service.delete(event.id, make_user())


class TestListEvents:
    """Tests for list_events."""

    async def test_soonest_first(self, unit_env):
        event_service = await unit_env.get(EventService)
        faculty = make_user(role=UserRole.FACULTY)
        later = await event_service.create(faculty, "Fest", "Cultural fest", NEXT_WEEK)
        sooner = await event_service.create(
            faculty, "Talk", "Guest talk", NEXT_WEEK - timedelta(days=3)
        )

        page = await event_service.list_events(EventFilter())

        assert [e.id for e in page.events] == [sooner.id, later.id]
        assert page.total == 2

    async def test_starts_from_hides_past_events(self, unit_env):
        event_service = await unit_env.get(EventService)
        faculty = make_user(role=UserRole.FACULTY)
        await event_service.create(
            faculty, "Orientation", "Welcome week", datetime.now() - timedelta(days=30)
        )
        upcoming = await event_service.create(faculty, "Fest", "Cultural fest", NEXT_WEEK)

        page = await event_service.list_events(
            EventFilter(starts_from=datetime.now(timezone.utc))
        )

        assert [e.id for e in page.events] == [upcoming.id]
        assert page.total == 1

    async def test_pagination(self, unit_env):
        event_service = await unit_env.get(EventService)
        faculty = make_user(role=UserRole.FACULTY)
        events = [
            await event_service.create(
                faculty, f"Talk {i}", "Guest talk", NEXT_WEEK + timedelta(days=i)
            )
            for i in range(3)
        ]

        second = await event_service.list_events(EventFilter(), page=2, page_size=2)

        assert [e.id for e in second.events] == [events[2].id]
        assert (second.total, second.total_pages) == (3, 2)

    async def test_zero_limit_is_rejected(self, unit_env):
        event_service = await unit_env.get(EventService)

        with pytest.raises(ValidationError) as exc_info:
            await event_service.list_events(EventFilter(), page_size=0)

        assert exc_info.value.field == "limit"
