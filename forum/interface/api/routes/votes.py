"""Vote routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetAnswerScoreRequest,
    GetAnswerScoreUseCase,
    ScoreInfo,
)
from forum.config import Settings
from forum.domain.error import InvalidInputError, NotFoundError, VoteConflictError
from forum.domain.service import JWTService
from forum.interface.api.session import require_user_id

router = APIRouter(prefix="/answers", tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body: {"type": "up" | "down"}."""

    type: Any = None


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    answer_id: str,
    request: Request,
    use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    body: Optional[VoteBody] = None,
) -> CastVoteResponse:
    """Vote on an answer.

    Voting the same way again removes the vote; voting the other way
    switches it. Requires authentication.

    Raises:
        HTTPException: 401 without a session, 400 for a bad vote type,
            404 for an unknown user or answer, 409 when a concurrent
            request changed the same vote, 500 otherwise
    """
    user_id = require_user_id(request, settings, jwt_service)

    try:
        return await use_case.execute(
            CastVoteRequest(
                answer_id=answer_id,
                user_id=user_id,
                type=body.type if body else None,
            )
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except VoteConflictError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Vote was changed by another request, please retry",
        )
    except Exception as e:
        logfire.error("Error handling vote", answer_id=answer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{answer_id}/score", response_model=ScoreInfo)
async def get_score(
    answer_id: str,
    use_case: FromDishka[GetAnswerScoreUseCase],
) -> ScoreInfo:
    """Get the vote totals on an answer."""
    try:
        return await use_case.execute(GetAnswerScoreRequest(answer_id=answer_id))
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found"
        )
