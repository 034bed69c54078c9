"""SQLAlchemy table definitions for UniHub.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (projection of the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column(
        "role",
        Enum("Student", "Faculty", name="user_role", create_type=False),
        nullable=False,
        server_default="Student",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# DOUBTS TABLE (aggregate root)
# ============================================================================
doubts_table = Table(
    "doubts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("subject", String(100), nullable=False),
    Column("semester", Integer, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("asked_by_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("is_solved", Boolean, nullable=False, server_default="false"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("semester BETWEEN 1 AND 8", name="doubt_semester_range"),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="doubt_tally_positive"),
)

Index("idx_doubts_created_at", doubts_table.c.created_at.desc(), doubts_table.c.id.desc())
Index("idx_doubts_subject", doubts_table.c.subject)
Index("idx_doubts_semester", doubts_table.c.semester)
Index("idx_doubts_asked_by_id", doubts_table.c.asked_by_id)

# ============================================================================
# ANSWERS TABLE (children of a doubt, keyed by doubt_id)
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "doubt_id", UUID, ForeignKey("doubts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", Text, nullable=False),
    Column("position", Integer, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("doubt_id", "position", name="unique_answer_position"),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="answer_tally_positive"),
)

Index("idx_answers_doubt_id", answers_table.c.doubt_id)

# ============================================================================
# VOTES TABLE (Polymorphic - doubts, answers and note likes)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "votable_type",
        Enum("doubt", "answer", "note", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# NOTES TABLE (metadata only, files live with the storage collaborator)
# ============================================================================
notes_table = Table(
    "notes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("subject", String(100), nullable=False),
    Column("semester", Integer, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("uploaded_by_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("semester BETWEEN 1 AND 8", name="note_semester_range"),
    CheckConstraint("likes >= 0", name="note_likes_positive"),
)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False),
    Column("location", String(300), nullable=True),
    Column("created_by_id", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_events_date", events_table.c.date)

# ============================================================================
# SEARCH TABLES (documents + inverted index)
# ============================================================================
search_documents_table = Table(
    "search_documents",
    metadata,
    Column(
        "kind",
        Enum("notes", "doubts", "events", name="search_kind", create_type=False),
        primary_key=True,
    ),
    Column("source_id", UUID, primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("subject", String(300), nullable=False, server_default=""),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_search_documents_title_lower", func.lower(search_documents_table.c.title))

search_terms_table = Table(
    "search_terms",
    metadata,
    Column(
        "kind",
        Enum("notes", "doubts", "events", name="search_kind", create_type=False),
        primary_key=True,
    ),
    Column("source_id", UUID, primary_key=True),
    Column("term", Text, primary_key=True),
    ForeignKeyConstraint(
        ["kind", "source_id"],
        ["search_documents.kind", "search_documents.source_id"],
        ondelete="CASCADE",
    ),
)

# Substring lookups (LIKE '%abc%') need pg_trgm
Index(
    "idx_search_terms_term_trgm",
    search_terms_table.c.term,
    postgresql_using="gin",
    postgresql_ops={"term": "gin_trgm_ops"},
)
