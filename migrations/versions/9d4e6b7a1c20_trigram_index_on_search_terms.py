"""trigram index on search_terms

Search matches query tokens anywhere inside a term, so the prefix-only
text_pattern_ops index is replaced by a pg_trgm GIN index.

Revision ID: 9d4e6b7a1c20
Revises: 3c1f0a9d2b47
Create Date: 2026-10-21 09:41:17.502316

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "9d4e6b7a1c20"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d2b47"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
    op.drop_index("idx_search_terms_term", table_name="search_terms")
    op.execute(
        "CREATE INDEX idx_search_terms_term_trgm "
        "ON search_terms USING gin (term gin_trgm_ops)"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_search_terms_term_trgm", table_name="search_terms")
    op.execute(
        "CREATE INDEX idx_search_terms_term ON search_terms (term text_pattern_ops)"
    )
