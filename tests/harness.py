"""Test harness for unit, integration and end-to-end tests.

Settings are loaded from environment variables (configure via .env or export).
Integration runs assume a PostgreSQL server is already running and migrated.
"""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from unihub.config import AuthSettings
from unihub.domain.model import User
from unihub.domain.value import UserRole
from unihub.interface.api.app import create_app
from unihub.util.di import Component
from tests.di import build_test_container
from tests.factories import make_token, make_user


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        async def test_create_doubt(unit_env):
            doubt_service = await unit_env.get(DoubtService)
            doubt = await doubt_service.create(...)
            assert doubt.is_solved is False
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


@dataclass
class ApiEnv:
    """HTTP client bound to an app plus the app's container."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def login(
        self, name: str = "Asha", role: UserRole = UserRole.STUDENT
    ) -> tuple[User, dict[str, str]]:
        """Mint a token for a fresh user and return the auth header for it."""
        user = make_user(name, role)
        token = make_token(user, await self.container.get(AuthSettings))
        return user, {"Authorization": f"Bearer {token}"}


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for end-to-end fixtures driving the API over ASGI.

    State lives in the container's APP scope, so it carries across requests
    made within one test.

    Usage:
        api = create_api_fixture()

        async def test_health(api):
            response = await api.client.get("/health")
            assert response.status_code == 200
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        transport = httpx.ASGITransport(app=create_app(container))

        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            yield ApiEnv(client=client, container=container)

        await container.close()

    return _api_environment
