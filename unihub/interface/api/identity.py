"""Caller identity resolution for routes.

The identity provider issues a JWT which arrives either in the
``auth_token`` cookie or as an ``Authorization: Bearer`` header.
"""

from unihub.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from unihub.domain.error import UnauthenticatedError
from unihub.util.jwt import JWTError

BEARER_PREFIX = "bearer "


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the token from the cookie, falling back to the bearer header."""
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        return token or None
    return None


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    authorization: str | None,
) -> GetCurrentUserResponse:
    """Resolve the caller or fail.

    Raises:
        UnauthenticatedError: If no token was sent
        JWTError: If the token is invalid or expired
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise UnauthenticatedError()
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


async def optional_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    authorization: str | None,
) -> GetCurrentUserResponse | None:
    """Resolve the caller if possible; anonymous otherwise."""
    token = extract_token(auth_token, authorization)
    if not token:
        return None
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError:
        # Invalid token, treat as unauthenticated
        return None
