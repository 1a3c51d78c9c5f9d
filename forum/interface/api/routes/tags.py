"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from forum.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = Query(default=100, ge=1, le=500),
) -> ListTagsResponse:
    """Tags that have been used on questions, alphabetically."""
    return await use_case.execute(ListTagsRequest(limit=limit))
