"""Domain services."""

from .base import Service
from .image_service import MAX_IMAGE_BYTES, BlobStore, ImageService
from .post_service import PostService
from .query_service import PostQueryService
from .tag_service import TagService

__all__ = [
    "BlobStore",
    "ImageService",
    "MAX_IMAGE_BYTES",
    "PostQueryService",
    "PostService",
    "Service",
    "TagService",
]
