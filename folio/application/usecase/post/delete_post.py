"""Delete post use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import parse_post_id
from folio.domain.service import ImageService, PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post and its image."""

    def __init__(self, post_service: PostService, image_service: ImageService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            image_service: Image domain service
        """
        self.post_service = post_service
        self.image_service = image_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        The image is deleted first; if that fails the record stays.

        Args:
            request: Delete post request

        Returns:
            ID of the deleted post

        Raises:
            NotFoundError: If the post doesn't exist
            UpstreamError: If the image can't be deleted
        """
        with logfire.span("delete_post.execute", post_id=request.post_id):
            post_id = parse_post_id(request.post_id)
            post = await self.post_service.require_post(post_id)

            await self.image_service.delete(post.image_url)
            await self.post_service.delete_post(post_id)
            # A failed commit here leaves the row pointing at a deleted blob
            await self.post_service.commit()

            logfire.info("Post deleted successfully", post_id=str(post_id))
            return DeletePostResponse(post_id=str(post_id))
