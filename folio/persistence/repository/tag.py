"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model.tag import Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, TagId
from folio.persistence.mappers import row_to_tag, tag_to_dict
from folio.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert runs in a SAVEPOINT so a slug conflict only rolls back
        the insert, not the request transaction.

        Raises:
            IntegrityError: If the slug already exists
        """
        with logfire.span("tag_repository.save", slug=tag.slug.root):
            async with self.session.begin_nested():
                await self.session.execute(insert(tags_table).values(**tag_to_dict(tag)))
            return tag

    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        """Find tag by slug."""
        stmt = select(tags_table).where(tags_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug in a single query."""
        if not slugs:
            return []

        stmt = select(tags_table).where(
            tags_table.c.slug.in_([slug.root for slug in slugs])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name, tags_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
