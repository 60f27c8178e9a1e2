"""Domain model entities."""

from folio.domain.model.post import Post
from folio.domain.model.tag import Tag

__all__ = [
    "Post",
    "Tag",
]
