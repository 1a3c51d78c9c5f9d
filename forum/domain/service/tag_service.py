"""Tag domain service."""

from uuid import uuid4

import logfire

from forum.domain.model.tag import Tag
from forum.domain.repository import TagRepository
from forum.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_or_create_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Find the named tags, creating the ones that don't exist yet.

        Args:
            tag_names: Tag names (duplicates are collapsed, order kept)

        Returns:
            One tag per distinct name, in request order
        """
        with logfire.span(
            "tag_service.get_or_create_tags", tags=[t.root for t in tag_names]
        ):
            unique_names = list(dict.fromkeys(tag_names))
            existing = await self.tag_repository.find_by_names(unique_names)
            by_name = {tag.name: tag for tag in existing}

            tags = []
            for name in unique_names:
                tag = by_name.get(name)
                if tag is None:
                    tag = await self.tag_repository.save(
                        Tag(id=TagId(uuid4()), name=name)
                    )
                    logfire.info("Tag created", tag_name=name.root)
                tags.append(tag)

            return tags

    async def get_all_tags(self, limit: int = 100) -> list[Tag]:
        """Get all available tags.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags ordered by name
        """
        with logfire.span("tag_service.get_all_tags", limit=limit):
            tags = await self.tag_repository.find_all(limit=limit)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
