"""Identity token verification."""

from uuid import UUID

import logfire

from unihub.config import AuthSettings
from unihub.domain.model import User
from unihub.domain.value import UserId, UserRole
from unihub.util.jwt import JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Turns identity-provider tokens into users.

    UniHub never issues tokens; it shares the provider's signing secret and
    trusts the ``user_id``, ``name`` and ``role`` claims of a valid token.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def authenticate(self, token: str) -> User:
        """Verify a token and build the user it asserts.

        Raises:
            JWTError: If the token is invalid, expired or carries malformed claims
        """
        with logfire.span("jwt_service.authenticate"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", error=str(e))
                raise

            try:
                user = User(
                    id=UserId(UUID(payload.user_id)),
                    name=payload.name,
                    role=UserRole(payload.role),
                )
            except ValueError:
                logfire.warn("Token claims rejected", user_id=payload.user_id)
                raise JWTError("Invalid token claims")

            return user
