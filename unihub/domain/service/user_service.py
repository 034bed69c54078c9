"""User domain service."""

from typing import Sequence

import logfire

from unihub.domain.error import NotFoundError
from unihub.domain.model import User
from unihub.domain.repository import UserRepository
from unihub.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for the local user projection.

    Users are owned by the identity provider; UniHub resolves author IDs
    against the projection on read and refreshes it from verified tokens.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_user(self, user_id: UserId) -> User:
        """Resolve a user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.resolve_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Resolve several users at once.

        Unknown IDs are left out of the result.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_users", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def sync_user(self, user: User) -> User:
        """Store the identity provider's view of a user if it changed.

        Args:
            user: User as asserted by a verified token

        Returns:
            The stored user
        """
        with logfire.span("user_service.sync_user", user_id=str(user.id)):
            existing = await self.user_repository.find_by_id(user.id)
            if existing == user:
                return existing

            saved = await self.user_repository.save(user)
            logfire.info("User synced", user_id=str(user.id), role=user.role.value)
            return saved
