#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py                     # upgrade to head
    python scripts/run_migrations.py downgrade [<rev>]   # default: one step back
    python scripts/run_migrations.py upgrade <rev>
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from unihub.config import Settings
from unihub.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

DEFAULT_REVISION = {"upgrade": "head", "downgrade": "-1"}


def main(argv: list[str]) -> int:
    """Run one migration command."""
    action = argv[1] if len(argv) > 1 else "upgrade"
    if action not in DEFAULT_REVISION:
        print(__doc__, file=sys.stderr)
        return 2
    revision = argv[2] if len(argv) > 2 else DEFAULT_REVISION[action]

    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", action=action, revision=revision):
        try:
            getattr(command, action)(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                action=action,
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A failed migration must stop the deploy before the API starts
            raise

    logfire.info("Database migrated", action=action, revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
