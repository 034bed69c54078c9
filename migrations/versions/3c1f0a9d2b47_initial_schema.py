"""initial_schema

Create the foundational schema for UniHub:
- Users (projection of the identity provider's members)
- Doubts (questions with vote tally, answer count and solved flag)
- Answers (ordered children of a doubt)
- Votes (polymorphic: doubts, answers and note likes; one per user and item)
- Notes and Events (searchable collaborator collections)
- Search documents and terms (inverted index for federated search)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-19 10:12:04.118392

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "user_role": ("Student", "Faculty"),
    "votable_type": ("doubt", "answer", "note"),
    "vote_direction": ("up", "down"),
    "search_kind": ("notes", "doubts", "events"),
}


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("gen_random_uuid()"), nullable=False
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM(*ENUMS["user_role"], name="user_role", create_type=False),
            nullable=False,
            server_default="Student",
        ),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # DOUBTS table
    # ========================================================================
    op.create_table(
        "doubts",
        _uuid_pk(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("semester", sa.Integer(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("asked_by_id", sa.UUID(), nullable=False),
        sa.Column("is_solved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["asked_by_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("semester BETWEEN 1 AND 8", name="doubt_semester_range"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="doubt_tally_positive"
        ),
    )
    op.create_index(
        "idx_doubts_created_at",
        "doubts",
        [sa.text("created_at DESC"), sa.text("id DESC")],
    )
    op.create_index("idx_doubts_subject", "doubts", ["subject"])
    op.create_index("idx_doubts_semester", "doubts", ["semester"])
    op.create_index("idx_doubts_asked_by_id", "doubts", ["asked_by_id"])

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        _uuid_pk(),
        sa.Column("doubt_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["doubt_id"], ["doubts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("doubt_id", "position", name="unique_answer_position"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="answer_tally_positive"
        ),
    )
    op.create_index("idx_answers_doubt_id", "answers", ["doubt_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "votable_type",
            postgresql.ENUM(
                *ENUMS["votable_type"], name="votable_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column(
            "direction",
            postgresql.ENUM(
                *ENUMS["vote_direction"], name="vote_direction", create_type=False
            ),
            nullable=False,
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])
    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])

    # ========================================================================
    # NOTES table
    # ========================================================================
    op.create_table(
        "notes",
        _uuid_pk(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("semester", sa.Integer(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("uploaded_by_id", sa.UUID(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["uploaded_by_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("semester BETWEEN 1 AND 8", name="note_semester_range"),
        sa.CheckConstraint("likes >= 0", name="note_likes_positive"),
    )

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        _uuid_pk(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("location", sa.String(300), nullable=True),
        sa.Column("created_by_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_events_date", "events", ["date"])

    # ========================================================================
    # SEARCH tables (documents + inverted index)
    # ========================================================================
    search_kind = postgresql.ENUM(
        *ENUMS["search_kind"], name="search_kind", create_type=False
    )
    op.create_table(
        "search_documents",
        sa.Column("kind", search_kind, nullable=False),
        sa.Column("source_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("subject", sa.String(300), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("kind", "source_id"),
    )
    # Prefix lookups on lower(title) for suggestions
    op.execute(
        "CREATE INDEX idx_search_documents_title_lower "
        "ON search_documents (lower(title) text_pattern_ops)"
    )

    op.create_table(
        "search_terms",
        sa.Column("kind", search_kind, nullable=False),
        sa.Column("source_id", sa.UUID(), nullable=False),
        sa.Column("term", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(
            ["kind", "source_id"],
            ["search_documents.kind", "search_documents.source_id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("kind", "source_id", "term"),
    )
    # Prefix lookups on terms (LIKE 'abc%')
    op.execute(
        "CREATE INDEX idx_search_terms_term ON search_terms (term text_pattern_ops)"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("search_terms")
    op.drop_table("search_documents")
    op.drop_table("events")
    op.drop_table("notes")
    op.drop_table("votes")
    op.drop_table("answers")
    op.drop_table("doubts")
    op.drop_table("users")

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
