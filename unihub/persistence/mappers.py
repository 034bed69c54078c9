"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from unihub.domain.model import Answer, Doubt, Event, Note, SearchDocument, User, Vote
from unihub.domain.value import (
    AnswerId,
    DoubtId,
    EventId,
    NoteId,
    SearchKind,
    UserId,
    UserRole,
    VotableType,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        role=UserRole(row["role"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {"id": user.id, "name": user.name, "role": user.role.value}


def row_to_doubt(row: Dict[str, Any]) -> Doubt:
    """Convert database row to Doubt domain model.

    Args:
        row: Database row as dict

    Returns:
        Doubt domain model
    """
    return Doubt(
        id=DoubtId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        subject=row["subject"],
        semester=row["semester"],
        tags=list(row["tags"] or []),
        asked_by_id=UserId(_uuid(row["asked_by_id"])),
        is_solved=row["is_solved"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        answer_count=row["answer_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def doubt_to_dict(doubt: Doubt) -> Dict[str, Any]:
    """Convert Doubt domain model to database dict.

    Args:
        doubt: Doubt domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return doubt.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        doubt_id=DoubtId(_uuid(row["doubt_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        position=row["position"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "votable_type": vote.votable_type.value,
        "votable_id": vote.votable_id,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
    }


def row_to_note(row: Dict[str, Any]) -> Note:
    """Convert database row to Note domain model."""
    return Note(
        id=NoteId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        subject=row["subject"],
        semester=row["semester"],
        tags=list(row["tags"] or []),
        uploaded_by_id=UserId(_uuid(row["uploaded_by_id"])),
        likes=row["likes"],
        created_at=row["created_at"],
    )


def note_to_dict(note: Note) -> Dict[str, Any]:
    """Convert Note domain model to database dict."""
    return note.model_dump()


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model."""
    return Event(
        id=EventId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        date=row["date"],
        location=row.get("location"),
        created_by_id=UserId(_uuid(row["created_by_id"])),
        created_at=row["created_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    return event.model_dump()


def row_to_search_document(row: Dict[str, Any]) -> SearchDocument:
    """Convert database row to SearchDocument."""
    return SearchDocument(
        kind=SearchKind(row["kind"]),
        source_id=_uuid(row["source_id"]),
        title=row["title"],
        content=row["content"],
        subject=row["subject"],
        tags=list(row["tags"] or []),
        created_at=row["created_at"],
    )


def search_document_to_dict(document: SearchDocument) -> Dict[str, Any]:
    """Convert SearchDocument to database dict."""
    return {
        "kind": document.kind.value,
        "source_id": document.source_id,
        "title": document.title,
        "content": document.content,
        "subject": document.subject,
        "tags": document.tags,
        "created_at": document.created_at,
    }
