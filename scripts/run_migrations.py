#!/usr/bin/env python3
"""Apply Alembic migrations to the comments database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py base       # roll everything back
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from pastethread.config import Settings
from pastethread.util.logging import setup_logging
from pastethread.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade (or downgrade) the schema to the requested revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("migrations.run", target=target, environment=settings.environment):
        try:
            if target == "base":
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy instead of starting against a broken schema
            raise

        logfire.info("Database migrations applied", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
