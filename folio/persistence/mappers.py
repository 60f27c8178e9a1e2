"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import Post, Tag
from folio.domain.value import PostId, Slug, TagId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any], tag_ids: list[UUID] | None = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_ids: Tag IDs from post_tags, in position order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        image_url=row["image_url"],
        tag_ids=[TagId(_as_uuid(tag_id)) for tag_id in tag_ids or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts row.

    Tag IDs live in post_tags and are excluded.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return post.model_dump(exclude={"tag_ids"})


def post_tag_rows(post_id: PostId, tag_ids: list[TagId]) -> list[Dict[str, Any]]:
    """Build post_tags rows for an ordered tag list.

    Args:
        post_id: Post ID
        tag_ids: Tag IDs in order, duplicates allowed

    Returns:
        One row per list position
    """
    return [
        {"post_id": post_id, "position": position, "tag_id": tag_id}
        for position, tag_id in enumerate(tag_ids)
    ]


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": tag.id,
        "name": tag.name,
        "slug": tag.slug.root,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }
