"""Unit tests for GetCurrentUserUseCase."""

from uuid import uuid4

import pytest

from unihub.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from unihub.config import AuthSettings
from unihub.domain.repository import UserRepository
from unihub.domain.value import UserRole
from unihub.util.jwt import JWTError, create_token
from tests.factories import make_token, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for resolving the caller from a token."""

    async def test_valid_token_stores_user(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        auth_settings = await unit_env.get(AuthSettings)
        user = make_user("Dr. Rao", role=UserRole.FACULTY)

        response = await use_case.execute(
            GetCurrentUserRequest(token=make_token(user, auth_settings))
        )

        assert response.user_id == str(user.id)
        assert response.role == UserRole.FACULTY
        assert await user_repo.find_by_id(user.id) == user

    async def test_renamed_user_is_refreshed(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        auth_settings = await unit_env.get(AuthSettings)
        user = await user_repo.save(make_user("Asha"))
        renamed = user.model_copy(update={"name": "Asha K"})

        response = await use_case.execute(
            GetCurrentUserRequest(token=make_token(renamed, auth_settings))
        )

        assert response.name == "Asha K"
        assert (await user_repo.find_by_id(user.id)).name == "Asha K"

    async def test_garbage_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))

    async def test_foreign_signature(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        other_settings = auth_settings.model_copy(
            update={"jwt_secret": "someone-elses-secret"}
        )

        with pytest.raises(JWTError):
            await use_case.execute(
                GetCurrentUserRequest(token=make_token(make_user(), other_settings))
            )

    @pytest.mark.parametrize(
        "user_id, role", [("not-a-uuid", "Student"), (None, "Admin")]
    )
    async def test_malformed_claims(self, unit_env, user_id, role):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token(user_id or str(uuid4()), "Asha", role, auth_settings)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token=token))
