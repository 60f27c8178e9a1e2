"""Domain value objects."""

from folio.domain.value.identifiers import PostId, TagId
from folio.domain.value.types import (
    ImageUpload,
    Pagination,
    Slug,
    SortDirection,
    StoredBlob,
    slugify,
)

__all__ = [
    # Identifiers
    "PostId",
    "TagId",
    # Types
    "ImageUpload",
    "Pagination",
    "Slug",
    "SortDirection",
    "StoredBlob",
    "slugify",
]
