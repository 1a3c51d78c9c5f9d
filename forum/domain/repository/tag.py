"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.tag import Tag
from forum.domain.value import TagName


class TagRepository(ABC):
    """Storage for tags. Names are unique."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a tag.

        Raises:
            IntegrityError: If a tag with the same name exists
        """

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Tag with exactly this name, if any."""

    @abstractmethod
    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Every stored tag whose name is in ``names``; missing names are skipped."""

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Up to ``limit`` tags in name order."""

    @abstractmethod
    async def count(self) -> int:
        """Number of tags."""
