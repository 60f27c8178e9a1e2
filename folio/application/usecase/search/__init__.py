"""Search use cases."""

from .search_posts import SearchPostsRequest, SearchPostsResponse, SearchPostsUseCase

__all__ = [
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
]
