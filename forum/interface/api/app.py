"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import answers, auth, health, questions, tags, votes
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    questions.router,
    answers.router,
    votes.router,
    tags.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire is configured by scripts/start_app.py before this runs.

    Args:
        container: Container to resolve dependencies from; tests pass one
            built with mock components
    """
    settings = Settings()

    app = FastAPI(
        title="Forum API",
        description="Questions, threaded answers and answer voting",
        version="0.1.0",
    )
    instrument_fastapi(app)

    # The web client sends the session cookie cross-origin
    origins = {settings.frontend_url, "http://localhost:3000"}
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app, container or create_container())
    for router in ROUTERS:
        app.include_router(router)

    return app


# Entry point for uvicorn (see scripts/start_app.py)
app = create_app()
