"""Get current user use case."""

from pydantic import BaseModel

from unihub.domain.service import JWTService, UserService
from unihub.domain.value import UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT from cookie or bearer header


class GetCurrentUserResponse(BaseModel):
    """Authenticated caller."""

    user_id: str
    name: str
    role: UserRole


class GetCurrentUserUseCase:
    """Use case resolving the caller of a request from their token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: Token verification service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token and refresh the caller's local projection.

        The projection is what author lookups on doubts, answers, notes and
        events resolve against, so it follows name and role changes made at
        the identity provider.

        Raises:
            JWTError: If the token is invalid, expired or carries malformed claims
        """
        claimed = self.jwt_service.authenticate(request.token)
        user = await self.user_service.sync_user(claimed)

        return GetCurrentUserResponse(
            user_id=str(user.id), name=user.name, role=user.role
        )
