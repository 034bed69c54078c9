"""Capability checks for role- and ownership-restricted mutations.

Every restricted action is declared once in ``POLICY``; services call
``authorize`` instead of branching on roles themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

import logfire

from unihub.domain.error import ForbiddenError
from unihub.domain.model.user import User
from unihub.domain.value import UserRole


class Action(str, Enum):
    """Restricted actions."""

    TOGGLE_SOLVED = "toggle_solved"
    DELETE_DOUBT = "delete_doubt"
    CREATE_EVENT = "create_event"
    DELETE_EVENT = "delete_event"
    DELETE_NOTE = "delete_note"


@dataclass(frozen=True)
class Capability:
    """Who may perform an action.

    owner: the resource owner is allowed
    roles: members holding any of these roles are allowed regardless of ownership
    """

    owner: bool = False
    roles: frozenset[UserRole] = field(default_factory=frozenset)


POLICY: dict[Action, Capability] = {
    Action.TOGGLE_SOLVED: Capability(owner=True),
    Action.DELETE_DOUBT: Capability(owner=True, roles=frozenset({UserRole.FACULTY})),
    Action.CREATE_EVENT: Capability(roles=frozenset({UserRole.FACULTY})),
    Action.DELETE_EVENT: Capability(owner=True, roles=frozenset({UserRole.FACULTY})),
    Action.DELETE_NOTE: Capability(owner=True, roles=frozenset({UserRole.FACULTY})),
}


def is_allowed(actor: User, action: Action, owner_id: UUID | None = None) -> bool:
    """Check whether an actor holds the capability for an action."""
    capability = POLICY[action]
    if actor.role in capability.roles:
        return True
    return capability.owner and owner_id is not None and actor.id == owner_id


def authorize(
    actor: User,
    action: Action,
    resource: str,
    resource_id: UUID | None = None,
    owner_id: UUID | None = None,
) -> None:
    """Require a capability.

    Args:
        actor: Requesting user
        action: Requested action
        resource: Resource kind, for error reporting
        resource_id: Resource ID, for error reporting
        owner_id: Owner of the resource (None for actions on no resource)

    Raises:
        ForbiddenError: If the actor lacks the capability
    """
    if not is_allowed(actor, action, owner_id):
        logfire.warn(
            "Action forbidden",
            action=action.value,
            resource=resource,
            resource_id=str(resource_id),
            user_id=str(actor.id),
        )
        raise ForbiddenError(action.value, resource, str(resource_id), str(actor.id))
