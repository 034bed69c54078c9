"""Note repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pydantic import BaseModel

from unihub.domain.model.note import Note
from unihub.domain.value import NoteId


class NoteFilter(BaseModel):
    """Conjunctive filter for note listings.

    search_text follows the doubt listing rule: one field (title,
    description, subject or the joined tags) must contain every
    whitespace-delimited token, case-insensitively.
    """

    semester: int | None = None
    subject: str | None = None
    search_text: str | None = None

    @property
    def search_tokens(self) -> list[str]:
        return self.search_text.lower().split() if self.search_text else []


class NoteRepository(ABC):
    """Repository for note metadata."""

    @abstractmethod
    async def find_by_id(self, note_id: NoteId, for_update: bool = False) -> Optional[Note]:
        """Find a note by ID.

        Args:
            note_id: The note's unique identifier
            for_update: Lock the note for the rest of the transaction

        Returns:
            The note if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, note_ids: Sequence[NoteId]) -> List[Note]:
        """Find several notes at once (batch query)."""
        pass

    @abstractmethod
    async def find_all(
        self, note_filter: NoteFilter, limit: int = 10, offset: int = 0
    ) -> List[Note]:
        """Find notes matching a filter, newest first.

        Args:
            note_filter: Conjunctive filter
            limit: Maximum number of notes
            offset: Number of notes to skip

        Returns:
            Notes ordered by created_at desc, then id desc
        """
        pass

    @abstractmethod
    async def count(self, note_filter: NoteFilter) -> int:
        """Count notes matching a filter."""
        pass

    @abstractmethod
    async def save(self, note: Note) -> Note:
        """Save a note (create or update)."""
        pass

    @abstractmethod
    async def delete(self, note_id: NoteId) -> None:
        """Hard delete a note."""
        pass

    @abstractmethod
    async def apply_like_delta(self, note_id: NoteId, delta: int) -> Optional[Note]:
        """Atomically adjust the like count.

        Returns:
            The updated note, or None if it doesn't exist
        """
        pass
