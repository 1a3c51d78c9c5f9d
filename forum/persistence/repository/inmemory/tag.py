"""In-memory implementation of Tag repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model.tag import Tag
from forum.domain.repository.tag import TagRepository
from forum.domain.value import TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[str, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag; names are unique."""
        if tag.name.root in self._tags:
            raise IntegrityError("Duplicate tag name", None, Exception())
        self._tags[tag.name.root] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return self._tags.get(name.root)

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        return [self._tags[n.root] for n in names if n.root in self._tags]

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._tags.values(), key=lambda t: t.name.root)[:limit]

    async def count(self) -> int:
        """Count all tags."""
        return len(self._tags)
