"""PostgreSQL repository implementations."""

from unihub.persistence.repository.answer import PostgresAnswerRepository
from unihub.persistence.repository.doubt import PostgresDoubtRepository
from unihub.persistence.repository.event import PostgresEventRepository
from unihub.persistence.repository.note import PostgresNoteRepository
from unihub.persistence.repository.search import PostgresSearchRepository
from unihub.persistence.repository.user import PostgresUserRepository
from unihub.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresDoubtRepository",
    "PostgresEventRepository",
    "PostgresNoteRepository",
    "PostgresSearchRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
