#!/usr/bin/env python3
"""Bring the pinwall schema up to date before the API starts.

Exits non-zero on failure so the deploy stops instead of serving against a
half-migrated database. Nothing is migrated when the in-memory store is
configured.
"""

from pathlib import Path
import sys

from alembic import command
from alembic.config import Config
import logfire
from sqlalchemy.engine import make_url

from pinwall.config import Settings
from pinwall.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    if settings.storage.backend == "memory":
        logfire.info("In-memory storage configured, no migrations to run")
        return 0

    target = make_url(settings.database_url).render_as_string(hide_password=True)

    with logfire.span("Migrating database to head", database=target):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                database=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            return 1

    logfire.info("Database schema is at head", database=target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
