"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
