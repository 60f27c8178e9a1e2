"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from folio.domain.repository.post import (
    PostChanges,
    PostFilter,
    PostQuery,
    PostRepository,
    PostSort,
    PostSortField,
)
from folio.domain.repository.tag import TagRepository

__all__ = [
    "PostChanges",
    "PostFilter",
    "PostQuery",
    "PostRepository",
    "PostSort",
    "PostSortField",
    "TagRepository",
]
