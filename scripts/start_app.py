#!/usr/bin/env python3
"""Serve the API with uvicorn after logging and Logfire are set up."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Before the app import so startup failures are traced
    configure_logfire(settings)

    logfire.info("Starting API", port=settings.port, environment=settings.environment)
    try:
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
