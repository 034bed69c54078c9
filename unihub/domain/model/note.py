"""Note entity.

Study notes shared by members. File storage and download counting live
with the storage collaborator; UniHub keeps the searchable metadata and
the like tally.
"""

from datetime import datetime

from pydantic import Field, field_validator

from unihub.domain.model.common import DomainModel
from unihub.domain.model.doubt import clean_tags
from unihub.domain.value import MAX_SEMESTER, MIN_SEMESTER, NoteId, UserId


class Note(DomainModel):
    """Study note metadata."""

    id: NoteId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    subject: str = Field(min_length=1, max_length=100)
    semester: int = Field(ge=MIN_SEMESTER, le=MAX_SEMESTER)
    tags: list[str] = Field(default_factory=list)
    uploaded_by_id: UserId
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "subject", "description", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return clean_tags(v) if isinstance(v, list) else v
