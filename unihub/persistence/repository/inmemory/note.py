"""In-memory note repository for testing."""

from typing import Optional, Sequence

from unihub.domain.model import Note
from unihub.domain.repository import NoteFilter, NoteRepository
from unihub.domain.value import NoteId


def _matches(note: Note, note_filter: NoteFilter) -> bool:
    if note_filter.semester is not None and note.semester != note_filter.semester:
        return False
    if note_filter.subject is not None and note.subject != note_filter.subject:
        return False

    tokens = note_filter.search_tokens
    if tokens:
        fields = [note.title, note.description, note.subject, " ".join(note.tags)]
        if not any(all(t in field.lower() for t in tokens) for field in fields):
            return False
    return True


class InMemoryNoteRepository(NoteRepository):
    """In-memory implementation of NoteRepository for testing."""

    def __init__(self) -> None:
        self._notes: dict[NoteId, Note] = {}

    async def find_by_id(self, note_id: NoteId, for_update: bool = False) -> Optional[Note]:
        """Find a note by ID."""
        return self._notes.get(note_id)

    async def find_by_ids(self, note_ids: Sequence[NoteId]) -> list[Note]:
        """Find several notes at once."""
        return [self._notes[i] for i in note_ids if i in self._notes]

    async def find_all(
        self, note_filter: NoteFilter, limit: int = 10, offset: int = 0
    ) -> list[Note]:
        """Find notes with filtering and pagination, newest first."""
        notes = [n for n in self._notes.values() if _matches(n, note_filter)]
        notes.sort(key=lambda n: (n.created_at, n.id), reverse=True)
        return notes[offset : offset + limit]

    async def count(self, note_filter: NoteFilter) -> int:
        """Count notes matching the filter."""
        return sum(1 for n in self._notes.values() if _matches(n, note_filter))

    async def save(self, note: Note) -> Note:
        """Save a note."""
        self._notes[note.id] = note
        return note

    async def delete(self, note_id: NoteId) -> None:
        """Hard delete a note."""
        self._notes.pop(note_id, None)

    async def apply_like_delta(self, note_id: NoteId, delta: int) -> Optional[Note]:
        """Adjust the like count."""
        note = self._notes.get(note_id)
        if note is None:
            return None
        updated = note.model_copy(update={"likes": note.likes + delta})
        self._notes[note_id] = updated
        return updated
