"""Query construction for post listing and search."""

import logfire

from folio.domain.error import ValidationError
from folio.domain.repository import (
    PostFilter,
    PostQuery,
    PostSort,
    PostSortField,
)
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, SortDirection

from .base import Service

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(value: int | str | None, default: int) -> int:
    """Parse a page/limit parameter.

    Anything that is not a positive integer falls back to ``default``.

    Args:
        value: Raw value from the query string
        default: Fallback

    Returns:
        Parsed value or the default
    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


class PostQueryService(Service):
    """Builds ``PostQuery`` objects from raw request parameters."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize query service.

        Args:
            tag_repository: Tag repository used to resolve tag slugs
        """
        self.tag_repository = tag_repository

    async def build_listing(
        self,
        page: int | str | None = None,
        limit: int | str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        tag_slugs: str | None = None,
    ) -> PostQuery:
        """Build the query behind the post listing.

        Args:
            page: 1-based page number
            limit: Page size
            sort_by: Sort field name (camelCase or snake_case)
            sort_order: "asc" for ascending, anything else descending
            tag_slugs: Comma-separated tag slugs

        Returns:
            Built query
        """
        with logfire.span("query_service.build_listing", tags=tag_slugs):
            post_filter = PostFilter()
            if tag_slugs:
                post_filter = PostFilter(tag_ids=await self._resolve_slugs(tag_slugs))

            return self._paginate(
                post_filter,
                PostSort(
                    field=PostSortField.parse(sort_by),
                    direction=SortDirection.parse(sort_order),
                ),
                page,
                limit,
            )

    def build_search(
        self,
        query: str | None,
        page: int | str | None = None,
        limit: int | str | None = None,
    ) -> PostQuery:
        """Build the query behind keyword search.

        Args:
            query: Substring to look for in title or description
            page: 1-based page number
            limit: Page size

        Returns:
            Built query, newest posts first

        Raises:
            ValidationError: If the search text is missing or empty
        """
        if not query:
            raise ValidationError("Search query is required")

        return self._paginate(PostFilter(text=query), PostSort(), page, limit)

    async def _resolve_slugs(self, tag_slugs: str) -> frozenset:
        slugs = []
        for piece in tag_slugs.split(","):
            piece = piece.strip()
            try:
                slugs.append(Slug(piece))
            except ValueError:
                # Not a valid slug, so no tag can match it
                logfire.debug("Ignoring malformed tag slug", slug=piece)

        tags = await self.tag_repository.find_by_slugs(slugs) if slugs else []
        if not tags:
            logfire.info("Tag filter matched no tags", tags=tag_slugs)
        return frozenset(tag.id for tag in tags)

    @staticmethod
    def _paginate(
        post_filter: PostFilter,
        sort: PostSort,
        page: int | str | None,
        limit: int | str | None,
    ) -> PostQuery:
        page_number = parse_positive_int(page, DEFAULT_PAGE)
        page_size = parse_positive_int(limit, DEFAULT_LIMIT)
        return PostQuery(
            filter=post_filter,
            sort=sort,
            page=page_number,
            skip=(page_number - 1) * page_size,
            limit=page_size,
        )
