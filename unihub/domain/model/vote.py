"""Vote entity.

Votes are directional endorsements. Each user holds at most one vote per
votable item (doubt, answer or note).
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from unihub.domain.model.common import DomainModel
from unihub.domain.value import UserId, VotableType, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Repeating the same direction removes the vote, the opposite
      direction replaces it
    - Polymorphic reference to votable (doubt, answer or note)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # DoubtId, AnswerId or NoteId (all UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
