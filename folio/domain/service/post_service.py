"""Post domain service."""

import logfire

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model.post import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Post
from folio.domain.repository import PostChanges, PostFilter, PostQuery, PostRepository
from folio.domain.value import PostId

from .base import Service


def clean_title(title: str | None) -> str | None:
    """Trim a title and check its length.

    Args:
        title: Raw title

    Returns:
        Trimmed title, or None if the title is missing or blank

    Raises:
        ValidationError: If the trimmed title is too long
    """
    if title is None or not title.strip():
        return None
    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title cannot be more than {TITLE_MAX_LENGTH} characters"
        )
    return title


def clean_description(description: str | None) -> str | None:
    """Check a description's length.

    Args:
        description: Raw description

    Returns:
        The description, or None if it is missing or blank

    Raises:
        ValidationError: If the description is too long
    """
    if description is None or not description.strip():
        return None
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Description cannot be more than {DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        """Apply a partial update to a post.

        Args:
            post_id: Post ID
            changes: Fields to replace

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post disappeared before the update
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            fields=sorted(changes.model_dump(exclude_none=True)),
        ):
            updated = await self.post_repository.update(post_id, changes)
            if updated is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post record.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                logfire.warn("Post not found for delete", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post deleted", post_id=str(post_id))

    async def list_posts(self, query: PostQuery) -> list[Post]:
        """List posts for a built query.

        Args:
            query: Filter, sort and page window

        Returns:
            Posts in the window
        """
        with logfire.span(
            "post_service.list_posts",
            sort=query.sort.field.value,
            direction=query.sort.direction.value,
            skip=query.skip,
            limit=query.limit,
        ):
            posts = await self.post_repository.find_all(query)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def count_posts(self, post_filter: PostFilter) -> int:
        """Count posts matching a filter.

        Args:
            post_filter: Predicate

        Returns:
            Number of matching posts
        """
        return await self.post_repository.count(post_filter)

    async def commit(self) -> None:
        """Make the post changes made so far durable."""
        await self.post_repository.commit()
