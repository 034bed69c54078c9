"""Unit tests for the capability policy."""

from uuid import uuid4

import pytest

from unihub.domain.error import ForbiddenError
from unihub.domain.service import Action, authorize, is_allowed
from unihub.domain.value import UserRole
from tests.factories import make_user


class TestIsAllowed:
    """Tests for is_allowed."""

    def test_only_the_asker_toggles_solved(self):
        asker = make_user()
        faculty = make_user(role=UserRole.FACULTY)

        assert is_allowed(asker, Action.TOGGLE_SOLVED, owner_id=asker.id)
        assert not is_allowed(make_user(), Action.TOGGLE_SOLVED, owner_id=asker.id)
        assert not is_allowed(faculty, Action.TOGGLE_SOLVED, owner_id=asker.id)

    @pytest.mark.parametrize(
        "action", [Action.DELETE_DOUBT, Action.DELETE_NOTE, Action.DELETE_EVENT]
    )
    def test_owner_or_faculty_may_delete(self, action):
        owner = make_user()

        assert is_allowed(owner, action, owner_id=owner.id)
        assert is_allowed(make_user(role=UserRole.FACULTY), action, owner_id=owner.id)
        assert not is_allowed(make_user(), action, owner_id=owner.id)

    def test_only_faculty_create_events(self):
        assert is_allowed(make_user(role=UserRole.FACULTY), Action.CREATE_EVENT)
        assert not is_allowed(make_user(), Action.CREATE_EVENT)

    def test_missing_owner_never_matches(self):
        assert not is_allowed(make_user(), Action.TOGGLE_SOLVED, owner_id=None)


class TestAuthorize:
    """Tests for authorize."""

    def test_raises_forbidden_with_context(self):
        student = make_user()
        resource_id = uuid4()

        with pytest.raises(ForbiddenError) as exc_info:
            authorize(
                student,
                Action.TOGGLE_SOLVED,
                "doubt",
                resource_id,
                owner_id=uuid4(),
            )

        assert exc_info.value.action == "toggle_solved"
        assert exc_info.value.resource_id == str(resource_id)
        assert exc_info.value.user_id == str(student.id)

    def test_allowed_action_passes_silently(self):
        owner = make_user()

        authorize(owner, Action.DELETE_DOUBT, "doubt", uuid4(), owner_id=owner.id)
