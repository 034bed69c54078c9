"""Answer entity.

Answers belong to exactly one doubt and have no lifecycle of their own:
they are appended, never edited or moved, and removed only when the
parent doubt is deleted.
"""

from datetime import datetime

from pydantic import Field

from unihub.domain.model.common import DomainModel
from unihub.domain.value import AnswerId, DoubtId, UserId

ANSWER_MAX_LENGTH = 10000


class Answer(DomainModel):
    """Answer to a doubt.

    The answer references its parent only by id. position is the 0-based
    creation order within the doubt and defines the listing order.
    """

    id: AnswerId
    doubt_id: DoubtId
    author_id: UserId
    content: str = Field(min_length=1, max_length=ANSWER_MAX_LENGTH)
    position: int = Field(default=0, ge=0)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
