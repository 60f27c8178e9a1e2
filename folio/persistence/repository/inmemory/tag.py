"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional

from sqlalchemy.exc import IntegrityError

from folio.domain.model.tag import Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, TagId


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._slug_index: dict[str, TagId] = {}

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Raises:
            IntegrityError: If the slug already exists
        """
        if tag.slug.root in self._slug_index:
            raise IntegrityError("Duplicate tag slug", None, Exception())

        self._tags[tag.id] = deepcopy(tag)
        self._slug_index[tag.slug.root] = tag.id
        return deepcopy(tag)

    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        """Find tag by slug."""
        tag_id = self._slug_index.get(slug.root)
        if tag_id:
            return deepcopy(self._tags[tag_id])
        return None

    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug."""
        tags = []
        for slug in dict.fromkeys(slugs):
            tag = await self.find_by_slug(slug)
            if tag:
                tags.append(tag)
        return tags

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [deepcopy(self._tags[t]) for t in dict.fromkeys(tag_ids) if t in self._tags]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = sorted(self._tags.values(), key=lambda t: (t.name, t.id))
        return [deepcopy(tag) for tag in tags]
