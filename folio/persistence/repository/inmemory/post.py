"""In-memory implementation of Post repository for testing."""

from copy import deepcopy
from typing import Optional

from folio.domain.model import Post
from folio.domain.repository.post import (
    PostChanges,
    PostFilter,
    PostQuery,
    PostRepository,
)
from folio.domain.value import PostId, SortDirection


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._posts: dict[PostId, Post] = {}

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        self._posts[post.id] = deepcopy(post)
        return deepcopy(post)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        return deepcopy(post) if post else None

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply a partial update and bump updated_at."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.touched(**changes.model_dump(exclude_none=True))
        self._posts[post_id] = updated
        return deepcopy(updated)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        return self._posts.pop(post_id, None) is not None

    async def find_all(self, query: PostQuery) -> list[Post]:
        """Find posts matching a query, sorted and paginated."""
        attribute = query.sort.field.attribute
        posts = sorted(
            (post for post in self._posts.values() if query.filter.matches(post)),
            key=lambda p: (getattr(p, attribute), p.id),
            reverse=query.sort.direction == SortDirection.DESC,
        )
        window = posts[query.skip : query.skip + query.limit]
        return [deepcopy(post) for post in window]

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching a filter."""
        return sum(1 for post in self._posts.values() if post_filter.matches(post))

    async def commit(self) -> None:
        """Changes apply immediately; nothing to commit."""
        pass
