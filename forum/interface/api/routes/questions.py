"""Question routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from forum.config import Settings
from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.service import JWTService
from forum.interface.api.session import get_optional_user_id, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionBody(BaseModel):
    """Body of a new question."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    page: int = 1,
    limit: int = 10,
) -> ListQuestionsResponse:
    """List questions newest first.

    Example:
        GET /questions?page=2&limit=20
    """
    try:
        return await use_case.execute(ListQuestionsRequest(page=page, limit=limit))
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    body: CreateQuestionBody,
    request: Request,
    use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> CreateQuestionResponse:
    """Ask a question. Requires authentication.

    Tags that don't exist yet are created.
    """
    user_id = require_user_id(request, settings, jwt_service)

    try:
        return await use_case.execute(
            CreateQuestionRequest(
                title=body.title,
                description=body.description,
                tags=body.tags,
                author_id=user_id,
            )
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logfire.error("Error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    request: Request,
    use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> GetQuestionResponse:
    """Get a question with its answer tree.

    Authentication is optional; signed-in viewers see their own votes.
    """
    viewer_id = get_optional_user_id(request, settings, jwt_service)

    try:
        return await use_case.execute(
            GetQuestionRequest(question_id=question_id, viewer_id=viewer_id)
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found"
        )
