"""Update post use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import PostItem, parse_post_id, populate_post
from folio.domain.error import UpstreamError
from folio.domain.repository import PostChanges
from folio.domain.service import ImageService, PostService, TagService
from folio.domain.service.post_service import clean_description, clean_title
from folio.domain.value import ImageUpload, PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Every field except ``post_id`` is optional; empty values keep the
    current value.
    """

    post_id: str
    title: str | None = None
    description: str | None = None
    image: ImageUpload | None = None
    tags: list[str] | str | None = None


class UpdatePostResponse(PostItem):
    """Update post response: the updated post with tags populated."""

    pass


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for updating a post's content, image and tags."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        image_service: ImageService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            image_service: Image domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.image_service = image_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        A new image is uploaded before the record changes; the previous
        image is deleted only after the change is committed.

        Args:
            request: Update post request

        Returns:
            Updated post with tags populated

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If a supplied field is invalid
            UpstreamError: If the new image can't be uploaded
        """
        with logfire.span("update_post.execute", post_id=request.post_id):
            post_id = parse_post_id(request.post_id)
            post = await self.post_service.require_post(post_id)

            title = clean_title(request.title)
            description = clean_description(request.description)
            self.tag_service.validate_names(request.tags)

            new_image_url = None
            if request.image is not None:
                image = self.image_service.validate(request.image)
                new_image_url = await self.image_service.upload(image)

            tag_ids = await self.tag_service.resolve_tags(request.tags)

            updated = await self.post_service.update_post(
                post_id,
                PostChanges(
                    title=title,
                    description=description,
                    image_url=new_image_url,
                    # An empty resolution keeps the current tags
                    tag_ids=tag_ids or None,
                ),
            )

            if new_image_url is not None:
                # The row must point at the new image durably before the old blob goes
                await self.post_service.commit()
                await self._delete_previous_image(post.image_url, post_id)

            logfire.info("Post updated successfully", post_id=str(post_id))

            item = await populate_post(updated, self.tag_service)
            return UpdatePostResponse(**item.model_dump())

    async def _delete_previous_image(self, url: str, post_id: PostId) -> None:
        try:
            await self.image_service.delete(url)
        except UpstreamError as e:
            logfire.error(
                "Orphaned blob: previous image could not be deleted",
                post_id=str(post_id),
                url=url,
                error=str(e),
            )
