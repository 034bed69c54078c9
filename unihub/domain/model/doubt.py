"""Doubt aggregate root.

A doubt is a question asked by a member. It owns its answers (stored as
child records keyed by doubt id), its own vote tally and the solved flag
that only the asker may toggle.
"""

from datetime import datetime

from pydantic import Field, field_validator

from unihub.domain.model.common import DomainModel
from unihub.domain.value import DoubtId, MAX_SEMESTER, MIN_SEMESTER, UserId

TITLE_MAX_LENGTH = 300
CONTENT_MAX_LENGTH = 10000
SUBJECT_MAX_LENGTH = 100


def clean_tags(tags: list[str]) -> list[str]:
    """Trim tags and drop empty entries, keeping order and duplicates."""
    return [tag.strip() for tag in tags if tag.strip()]


class Doubt(DomainModel):
    """Doubt aggregate root.

    Invariants:
    - title, content and subject are non-empty (title and subject trimmed)
    - semester is within 1-8 and never revised
    - asked_by_id never changes
    - upvotes/downvotes are maintained incrementally by the vote ledger
    - answer_count equals the number of answers and doubles as the next
      answer position
    """

    id: DoubtId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    subject: str = Field(min_length=1, max_length=SUBJECT_MAX_LENGTH)
    semester: int = Field(ge=MIN_SEMESTER, le=MAX_SEMESTER)
    tags: list[str] = Field(default_factory=list)
    asked_by_id: UserId
    is_solved: bool = False
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "subject", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return clean_tags(v) if isinstance(v, list) else v

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes
