"""Builders for test data."""

from datetime import datetime, timedelta
from uuid import uuid4

from unihub.config import AuthSettings
from unihub.domain.model import Doubt, Note, User
from unihub.domain.repository import DoubtRepository, NoteRepository, UserRepository
from unihub.domain.value import DoubtId, NoteId, UserId, UserRole
from unihub.util.jwt import create_token


def make_user(name: str = "Asha", role: UserRole = UserRole.STUDENT) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), name=name, role=role)


def make_token(user: User, auth_settings: AuthSettings) -> str:
    """Issue a token the way the identity provider does."""
    return create_token(str(user.id), user.name, user.role.value, auth_settings)


async def seed_user(user_repo: UserRepository, **kwargs) -> User:
    """Store a user and return it."""
    return await user_repo.save(make_user(**kwargs))


async def seed_doubt(
    doubt_repo: DoubtRepository,
    asked_by: User,
    title: str = "Binary Trees",
    content: str = "How do I balance a binary tree?",
    subject: str = "DSA",
    semester: int = 3,
    tags: list[str] | None = None,
    age: timedelta = timedelta(0),
) -> Doubt:
    """Store a doubt directly, bypassing the service (no indexing)."""
    created_at = datetime.now() - age
    doubt = Doubt(
        id=DoubtId(uuid4()),
        title=title,
        content=content,
        subject=subject,
        semester=semester,
        tags=tags or [],
        asked_by_id=asked_by.id,
        created_at=created_at,
        updated_at=created_at,
    )
    return await doubt_repo.save(doubt)


async def seed_note(
    note_repo: NoteRepository,
    uploaded_by: User,
    title: str = "Operating Systems unit 2",
    description: str = "Scheduling and deadlocks",
    subject: str = "OS",
    semester: int = 4,
    tags: list[str] | None = None,
    age: timedelta = timedelta(0),
) -> Note:
    """Store a note directly, bypassing the service (no indexing)."""
    note = Note(
        id=NoteId(uuid4()),
        title=title,
        description=description,
        subject=subject,
        semester=semester,
        tags=tags or [],
        uploaded_by_id=uploaded_by.id,
        created_at=datetime.now() - age,
    )
    return await note_repo.save(note)
