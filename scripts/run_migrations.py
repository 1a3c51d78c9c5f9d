#!/usr/bin/env python3
"""Upgrade the database to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(config, "head")
        except Exception:
            # Fail the deploy rather than serve on a half-migrated schema
            logfire.exception("Migration failed")
            raise

    logfire.info("Database is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
