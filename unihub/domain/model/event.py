"""Event entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from unihub.domain.model.common import DomainModel
from unihub.domain.value import EventId, UserId


class Event(DomainModel):
    """College event announced by faculty.

    RSVP bookkeeping belongs to the events collaborator.
    """

    id: EventId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    date: datetime
    location: Optional[str] = Field(default=None, max_length=300)
    created_by_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v
