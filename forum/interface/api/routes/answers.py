"""Answer routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from forum.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from forum.config import Settings
from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.service import JWTService
from forum.interface.api.session import require_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerBody(BaseModel):
    """Body of a new answer or reply."""

    question_id: str
    content: str
    parent_id: Optional[str] = None


@router.post(
    "", response_model=CreateAnswerResponse, status_code=status.HTTP_201_CREATED
)
async def create_answer(
    body: CreateAnswerBody,
    request: Request,
    use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> CreateAnswerResponse:
    """Answer a question, or reply to an answer when parent_id is set.

    Requires authentication. The question or parent author is notified.
    """
    user_id = require_user_id(request, settings, jwt_service)

    try:
        return await use_case.execute(
            CreateAnswerRequest(
                question_id=body.question_id,
                content=body.content,
                parent_id=body.parent_id,
                author_id=user_id,
            )
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error("Error creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
