"""List posts use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import PaginationInfo, PostItem, populate_posts
from folio.domain.service import PostQueryService, PostService, TagService
from folio.domain.value import Pagination


class ListPostsRequest(BaseModel):
    """List posts request.

    Values arrive as raw query-string text and are normalized by the
    query builder.
    """

    page: str | None = None
    limit: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    tags: str | None = None  # Comma-separated tag slugs


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    pagination: PaginationInfo


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing posts with sorting, tag filtering and pagination."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        query_service: PostQueryService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            query_service: Post query builder
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.query_service = query_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            One page of posts plus pagination info
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            limit=request.limit,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
            tags=request.tags,
        ):
            query = await self.query_service.build_listing(
                page=request.page,
                limit=request.limit,
                sort_by=request.sort_by,
                sort_order=request.sort_order,
                tag_slugs=request.tags,
            )

            total = await self.post_service.count_posts(query.filter)
            posts = await self.post_service.list_posts(query)
            items = await populate_posts(posts, self.tag_service)

            logfire.info("Posts listed", count=len(items), total=total)

            return ListPostsResponse(
                posts=items,
                pagination=PaginationInfo.from_pagination(
                    Pagination.from_total(query.page, query.limit, total)
                ),
            )
