"""Post repository interface and query types."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from folio.domain.model.post import Post
from folio.domain.value import PostId, SortDirection, TagId
from folio.domain.value.common import ValueObject


class PostSortField(str, Enum):
    """Fields a post listing can be sorted by."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    DESCRIPTION = "description"

    @property
    def attribute(self) -> str:
        """Name of the matching Post attribute / table column."""
        return {
            PostSortField.CREATED_AT: "created_at",
            PostSortField.UPDATED_AT: "updated_at",
            PostSortField.TITLE: "title",
            PostSortField.DESCRIPTION: "description",
        }[self]

    @classmethod
    def parse(cls, value: str | None) -> "PostSortField":
        """Accept camelCase or snake_case names; unknown names sort by creation time."""
        for field in cls:
            if value in (field.value, field.attribute):
                return field
        return cls.CREATED_AT


class PostFilter(ValueObject):
    """Store-agnostic predicate over posts.

    - tag_ids: None means no tag restriction; an empty set matches nothing
    - text: case-insensitive substring that must occur in title or description
    """

    tag_ids: Optional[frozenset[TagId]] = None
    text: Optional[str] = None

    def matches(self, post: Post) -> bool:
        """Evaluate the predicate against a single post."""
        if self.tag_ids is not None and not self.tag_ids.intersection(post.tag_ids):
            return False
        if self.text is not None:
            needle = self.text.lower()
            if needle not in post.title.lower() and needle not in post.description.lower():
                return False
        return True


class PostSort(ValueObject):
    """Sort specification for post listings."""

    field: PostSortField = PostSortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class PostQuery(ValueObject):
    """A fully built listing query: predicate, ordering and page window."""

    filter: PostFilter = PostFilter()
    sort: PostSort = PostSort()
    page: int = 1
    skip: int = 0
    limit: int = 10


class PostChanges(ValueObject):
    """Partial update for a post. Fields left as None keep their value."""

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    tag_ids: Optional[list[TagId]] = None


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply a partial update and bump ``updated_at``.

        Args:
            post_id: The post to update
            changes: Fields to replace

        Returns:
            The updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def find_all(self, query: PostQuery) -> list[Post]:
        """Find posts matching a query, sorted and paginated.

        Args:
            query: Filter, sort and page window

        Returns:
            Posts in the requested window
        """
        pass

    @abstractmethod
    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching a filter.

        Args:
            post_filter: Predicate to count under

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make every change made so far durable.

        Changes are otherwise committed when the request ends.
        """
        pass
