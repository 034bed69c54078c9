"""User reference.

Users are owned by the external identity provider. UniHub keeps a local
projection (id, display name, role) so that authors can be resolved on read.
"""

from pydantic import Field

from unihub.domain.model.common import DomainModel
from unihub.domain.value import UserId, UserRole


class User(DomainModel):
    """Member of the university community."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.STUDENT

    @property
    def is_faculty(self) -> bool:
        return self.role == UserRole.FACULTY
