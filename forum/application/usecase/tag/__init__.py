"""Tag use cases."""

from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagInfo

__all__ = ["ListTagsRequest", "ListTagsResponse", "ListTagsUseCase", "TagInfo"]
