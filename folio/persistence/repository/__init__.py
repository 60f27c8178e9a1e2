"""PostgreSQL repository implementations."""

from folio.persistence.repository.post import PostgresPostRepository
from folio.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresTagRepository",
]
