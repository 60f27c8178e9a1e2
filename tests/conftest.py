"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from folio.domain.model.post import Post
from folio.domain.model.tag import Tag
from folio.domain.value import ImageUpload, PostId, Slug, TagId

# Smallest valid PNG header, enough for anything that only checks bytes exist
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


def make_image(
    size: int | None = None,
    media_type: str = "image/png",
    filename: str | None = "photo.png",
) -> ImageUpload:
    """Build an image payload for tests.

    Args:
        size: Declared size in bytes (defaults to the content length)
        media_type: MIME type
        filename: Original filename

    Returns:
        ImageUpload value object
    """
    return ImageUpload(
        content=PNG_BYTES,
        media_type=media_type,
        size=len(PNG_BYTES) if size is None else size,
        filename=filename,
    )


def make_tag(name: str) -> Tag:
    """Build a tag whose slug is derived from its name."""
    now = datetime.now()
    return Tag(
        id=TagId(uuid4()),
        name=name,
        slug=Slug.from_name(name),
        created_at=now,
        updated_at=now,
    )


def make_post(
    title: str = "Test Post",
    description: str = "Test description",
    image_url: str = "https://res.cloudinary.com/mock/image/upload/v1/posts-api/test.png",
    tag_ids: list[TagId] | None = None,
    created_at: datetime | None = None,
) -> Post:
    """Build a post for seeding repositories directly."""
    created = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        description=description,
        image_url=image_url,
        tag_ids=tag_ids or [],
        created_at=created,
        updated_at=created,
    )
