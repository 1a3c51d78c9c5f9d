"""Logfire setup for the forum API.

Services log and trace through the ``logfire`` module directly:

    logfire.info("Vote cast", answer_id=str(answer_id), outcome=outcome.value)

    with logfire.span("vote_service.cast_vote", answer_id=str(answer_id)):
        ...

This module only wires Logfire up at startup and hooks it into FastAPI
and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum-api"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    OBSERVABILITY__SEND_TO_LOGFIRE wins when set; otherwise having a
    token is enough.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="indented",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire ready",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are left out of the spans; they carry the session cookie.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every query issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
