"""List tags use case."""

from pydantic import BaseModel, Field

from forum.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int = Field(default=100, ge=1, le=500)


class TagInfo(BaseModel):
    """Tag information."""

    id: str
    name: str


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagInfo]


class ListTagsUseCase:
    """Use case for listing all available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow."""
        tags = await self.tag_service.get_all_tags(limit=request.limit)
        return ListTagsResponse(
            tags=[TagInfo(id=str(tag.id), name=tag.name.root) for tag in tags]
        )
