"""Domain layer errors.

Every failure a domain service can report is one of these kinds. The
interface layer maps each kind to a stable HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed, missing or out-of-range input for a named field."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} on {resource} {resource_id}"
        )


class UnauthenticatedError(DomainError):
    """Raised when an operation needs an identity and none was resolved."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a write collides with a concurrent write to the same record."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Conflicting update on {resource} {identifier}")


class SearchUnavailableError(DomainError):
    """Raised by a search backing store that cannot serve requests.

    Never escapes the search service; it is downgraded to a degraded,
    empty result.
    """

    pass
