"""Response items shared by post and tag use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from folio.domain.error import NotFoundError
from folio.domain.model.post import Post
from folio.domain.model.tag import Tag
from folio.domain.service import TagService
from folio.domain.value import Pagination, PostId


class APIModel(BaseModel):
    """Response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TagItem(APIModel):
    """Tag as embedded in a post."""

    id: str
    name: str
    slug: str

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(id=str(tag.id), name=tag.name, slug=tag.slug.root)


class TagDetail(TagItem):
    """Tag with timestamps."""

    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagDetail":
        return cls(
            id=str(tag.id),
            name=tag.name,
            slug=tag.slug.root,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class PostItem(APIModel):
    """Post with its tags populated."""

    id: str
    title: str
    description: str
    image_url: str
    tags: list[TagItem]
    created_at: datetime
    updated_at: datetime


class PaginationInfo(APIModel):
    """Pagination metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "PaginationInfo":
        return cls(**pagination.model_dump())


def parse_post_id(raw: str) -> PostId:
    """Parse a post ID from a path parameter.

    An ID that is not a UUID cannot name an existing post.

    Raises:
        NotFoundError: If ``raw`` is not a UUID
    """
    try:
        return PostId(UUID(raw))
    except ValueError:
        raise NotFoundError("Post", raw)


async def populate_posts(posts: list[Post], tag_service: TagService) -> list[PostItem]:
    """Attach tag details to posts with one batch tag lookup.

    Tags keep the order (and repetition) of the post's tag list. IDs whose
    tag no longer exists are dropped.

    Args:
        posts: Posts to convert
        tag_service: Tag domain service

    Returns:
        Post items in the same order
    """
    all_tag_ids = [tag_id for post in posts for tag_id in post.tag_ids]
    tags = await tag_service.get_tags_by_ids(all_tag_ids)

    return [
        PostItem(
            id=str(post.id),
            title=post.title,
            description=post.description,
            image_url=post.image_url,
            tags=[
                TagItem.from_tag(tags[tag_id])
                for tag_id in post.tag_ids
                if tag_id in tags
            ],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        for post in posts
    ]


async def populate_post(post: Post, tag_service: TagService) -> PostItem:
    """Attach tag details to a single post."""
    items = await populate_posts([post], tag_service)
    return items[0]
