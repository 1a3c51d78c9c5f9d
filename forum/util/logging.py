"""Standard library logging setup.

Route modules log through ``logging.getLogger(__name__)``; those records
are forwarded to Logfire so they show up next to the spans of the
request that produced them.
"""

import logging
import sys

import logfire

from forum.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty libraries kept at WARNING
QUIET_LOGGERS = ("urllib3", "requests", "pusher", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the process.

    Args:
        settings: Application settings (``debug`` selects DEBUG level)
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger().addHandler(logfire.LogfireLoggingHandler())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
