"""Get post use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import PostItem, parse_post_id, populate_post
from folio.domain.service import PostService, TagService


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(PostItem):
    """Get post response: the post with tags populated."""

    pass


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for getting a single post."""

    def __init__(self, post_service: PostService, tag_service: TagService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            Post with tags populated

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            post = await self.post_service.require_post(parse_post_id(request.post_id))
            item = await populate_post(post, self.tag_service)
            return GetPostResponse(**item.model_dump())
