#!/usr/bin/env python3
"""Apply Fritter database migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9e2a7b40
"""

import argparse
import sys
import logfire
from alembic import command
from alembic.config import Config

from fritter.config import Settings
from fritter.util.logging import setup_logging
from fritter.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to the requested revision."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=args.revision):
        try:
            alembic_cfg = Config("alembic.ini")
            alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
            command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so deployment stops before serving on a broken schema
            raise

    logfire.info("Database migrations completed", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
