"""Search posts use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import PaginationInfo, PostItem, populate_posts
from folio.domain.service import PostQueryService, PostService, TagService
from folio.domain.value import Pagination


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    query: str | None = None
    page: str | None = None
    limit: str | None = None


class SearchPostsResponse(BaseModel):
    """Search posts response."""

    posts: list[PostItem]
    pagination: PaginationInfo


class SearchPostsUseCase(BaseUseCase[SearchPostsRequest, SearchPostsResponse]):
    """Use case for keyword search over titles and descriptions."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        query_service: PostQueryService,
    ) -> None:
        """Initialize search posts use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            query_service: Post query builder
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.query_service = query_service

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            One page of matching posts, newest first

        Raises:
            ValidationError: If the search text is missing
        """
        with logfire.span("search_posts.execute", query=request.query):
            query = self.query_service.build_search(
                request.query, page=request.page, limit=request.limit
            )

            total = await self.post_service.count_posts(query.filter)
            posts = await self.post_service.list_posts(query)
            items = await populate_posts(posts, self.tag_service)

            logfire.info("Search completed", count=len(items), total=total)

            return SearchPostsResponse(
                posts=items,
                pagination=PaginationInfo.from_pagination(
                    Pagination.from_total(query.page, query.limit, total)
                ),
            )
