"""Strongly typed identifiers for UniHub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
DoubtId = NewType("DoubtId", UUID)
AnswerId = NewType("AnswerId", UUID)
NoteId = NewType("NoteId", UUID)
EventId = NewType("EventId", UUID)
VoteId = NewType("VoteId", UUID)
