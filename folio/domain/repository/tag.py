"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.tag import Tag
from folio.domain.value import Slug, TagId


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag

        Raises:
            IntegrityError: If a tag with the same slug already exists
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        """Find tag by slug.

        Args:
            slug: Tag slug

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug in a single query.

        Args:
            slugs: Tag slugs

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags, unordered
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags, ordered by name.

        Returns:
            List of tags
        """
        pass
