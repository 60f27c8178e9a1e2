"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, false, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Post
from folio.domain.repository.post import (
    PostChanges,
    PostFilter,
    PostQuery,
    PostRepository,
)
from folio.domain.value import PostId, SortDirection
from folio.persistence.mappers import post_tag_rows, post_to_dict, row_to_post
from folio.persistence.tables import post_tags_table, posts_table


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally (escape char ``\\``)."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tag_ids_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch ordered tag IDs for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> tag IDs in position order
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, post_tags_table.c.tag_id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.post_id, post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag_id)

        return post_tag_map

    async def _rows_to_posts(self, rows) -> List[Post]:
        post_tag_map = await self._fetch_tag_ids_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), tag_ids=post_tag_map.get(row.id, []))
            for row in rows
        ]

    @staticmethod
    def _where(stmt, post_filter: PostFilter):
        """Translate a PostFilter into WHERE clauses."""
        if post_filter.tag_ids is not None:
            if not post_filter.tag_ids:
                stmt = stmt.where(false())
            else:
                tagged = select(post_tags_table.c.post_id).where(
                    post_tags_table.c.tag_id.in_(list(post_filter.tag_ids))
                )
                stmt = stmt.where(posts_table.c.id.in_(tagged))

        if post_filter.text is not None:
            pattern = f"%{escape_like(post_filter.text)}%"
            stmt = stmt.where(
                or_(
                    posts_table.c.title.ilike(pattern, escape="\\"),
                    posts_table.c.description.ilike(pattern, escape="\\"),
                )
            )

        return stmt

    async def save(self, post: Post) -> Post:
        """Insert a new post and its tag list."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            tag_count=len(post.tag_ids),
        ):
            await self.session.execute(insert(posts_table).values(**post_to_dict(post)))

            if post.tag_ids:
                await self.session.execute(
                    insert(post_tags_table), post_tag_rows(post.id, post.tag_ids)
                )

            await self.session.flush()
            return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            posts = await self._rows_to_posts([row])
            return posts[0]

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply a partial update and bump updated_at."""
        with logfire.span("post_repository.update", post_id=str(post_id)):
            values = changes.model_dump(exclude_none=True, exclude={"tag_ids"})
            values["updated_at"] = datetime.now()

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**values)
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            if result.fetchone() is None:
                return None

            if changes.tag_ids is not None:
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )
                if changes.tag_ids:
                    await self.session.execute(
                        insert(post_tags_table),
                        post_tag_rows(post_id, changes.tag_ids),
                    )

            await self.session.flush()
            return await self.find_by_id(post_id)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete). post_tags rows cascade."""
        stmt = (
            delete(posts_table)
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find posts matching a query, sorted and paginated."""
        with logfire.span(
            "post_repository.find_all",
            sort=query.sort.field.value,
            direction=query.sort.direction.value,
            skip=query.skip,
            limit=query.limit,
        ):
            sort_column = posts_table.c[query.sort.field.attribute]
            if query.sort.direction == SortDirection.ASC:
                order = (sort_column.asc(), posts_table.c.id.asc())
            else:
                order = (sort_column.desc(), posts_table.c.id.desc())

            stmt = (
                self._where(select(posts_table), query.filter)
                .order_by(*order)
                .offset(query.skip)
                .limit(query.limit)
            )

            result = await self.session.execute(stmt)
            rows = result.fetchall()

            posts = await self._rows_to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching a filter."""
        with logfire.span("post_repository.count"):
            stmt = self._where(
                select(func.count()).select_from(posts_table), post_filter
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def commit(self) -> None:
        """Commit the request's transaction now."""
        await self.session.commit()
        logfire.info("Post changes committed")
