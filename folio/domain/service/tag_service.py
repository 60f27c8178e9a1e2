"""Tag domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from folio.domain.error import ConflictError, UpstreamError, ValidationError
from folio.domain.model.tag import TAG_NAME_MAX_LENGTH, Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, TagId

from .base import Service


def split_tag_names(raw: list[str] | str | None) -> list[str]:
    """Turn the raw ``tags`` input into a list of names.

    A string is a comma-separated list and each piece is trimmed. A list is
    taken as given.

    Args:
        raw: Raw tag input

    Returns:
        Tag names in input order
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return [piece.strip() for piece in raw.split(",")]
    return list(raw)


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_tags(self, raw: list[str] | str | None) -> list[TagId]:
        """Resolve raw tag names to tag IDs, creating missing tags.

        Names are handled in order; duplicates yield duplicate IDs. Blank
        names are skipped.

        Args:
            raw: Comma-separated string, list of names, or None

        Returns:
            Tag IDs in input order

        Raises:
            ValidationError: If a name is longer than the tag name limit
        """
        names = split_tag_names(raw)

        with logfire.span("tag_service.resolve_tags", count=len(names)):
            tag_ids: list[TagId] = []
            for name in names:
                if not name.strip():
                    continue
                tag = await self._find_or_create(name)
                tag_ids.append(tag.id)

            logfire.info("Tags resolved", count=len(tag_ids))
            return tag_ids

    def validate_names(self, raw: list[str] | str | None) -> None:
        """Check raw tag names without touching the store.

        Args:
            raw: Comma-separated string, list of names, or None

        Raises:
            ValidationError: If a name is longer than the tag name limit
        """
        for name in split_tag_names(raw):
            self._check_name_length(name)

    async def create_tag(self, name: str | None) -> Tag:
        """Create a tag from a display name.

        Args:
            name: Tag display name

        Returns:
            Created tag

        Raises:
            ValidationError: If the name is blank or too long
            ConflictError: If a tag with the same slug already exists
        """
        if name is None or not name.strip():
            raise ValidationError("Tag name is required")
        self._check_name_length(name)

        with logfire.span("tag_service.create_tag", tag_name=name):
            slug = Slug.from_name(name)

            if await self.tag_repository.find_by_slug(slug):
                logfire.warn("Tag already exists", slug=slug.root)
                raise ConflictError("Tag already exists")

            try:
                tag = await self.tag_repository.save(self._new_tag(name, slug))
            except IntegrityError:
                logfire.warn("Tag created concurrently", slug=slug.root)
                raise ConflictError("Tag already exists")

            logfire.info("Tag created", tag_id=str(tag.id), slug=slug.root)
            return tag

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name.

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tags_by_ids(self, tag_ids: list[TagId]) -> dict[TagId, Tag]:
        """Batch load tags keyed by ID.

        Args:
            tag_ids: Tag IDs, may contain duplicates

        Returns:
            Mapping of tag ID to tag for every ID that exists
        """
        if not tag_ids:
            return {}
        tags = await self.tag_repository.find_by_ids(list(dict.fromkeys(tag_ids)))
        return {tag.id: tag for tag in tags}

    async def _find_or_create(self, name: str) -> Tag:
        # Slug comes from the name as supplied; the stored name is trimmed
        stored_name = name.strip()
        self._check_name_length(stored_name)

        slug = Slug.from_name(name)
        existing = await self.tag_repository.find_by_slug(slug)
        if existing:
            return existing

        try:
            tag = await self.tag_repository.save(self._new_tag(stored_name, slug))
        except IntegrityError:
            # Another request created the same slug between lookup and insert
            winner = await self.tag_repository.find_by_slug(slug)
            if winner is None:
                logfire.error("Tag slug conflict without a winner", slug=slug.root)
                raise UpstreamError(f"Could not resolve tag: {stored_name}")
            logfire.info("Tag slug conflict reconciled", slug=slug.root)
            return winner

        logfire.info("Tag created on first use", tag_id=str(tag.id), slug=slug.root)
        return tag

    @staticmethod
    def _check_name_length(name: str) -> None:
        if len(name.strip()) > TAG_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Tag name cannot be more than {TAG_NAME_MAX_LENGTH} characters"
            )

    @staticmethod
    def _new_tag(name: str, slug: Slug) -> Tag:
        now = datetime.now()
        return Tag(
            id=TagId(uuid4()),
            name=name.strip(),
            slug=slug,
            created_at=now,
            updated_at=now,
        )
