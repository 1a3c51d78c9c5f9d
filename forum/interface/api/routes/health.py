"""Health check routes."""

import logging
from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from forum.application.usecase.health import (
    CheckDatabaseResponse,
    CheckDatabaseUseCase,
)
from forum.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/health/db", response_model=CheckDatabaseResponse)
async def database_check(
    use_case: FromDishka[CheckDatabaseUseCase],
) -> CheckDatabaseResponse:
    """Check that the database answers queries.

    Returns:
        Row counts for the main tables

    Raises:
        HTTPException: 500 if the database can't be queried
    """
    try:
        return await use_case.execute()
    except Exception:
        logger.exception("Database test failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database test failed",
        )
