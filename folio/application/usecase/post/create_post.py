"""Create post use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import PostItem, populate_post
from folio.domain.error import ValidationError
from folio.domain.model.post import Post
from folio.domain.service import ImageService, PostService, TagService
from folio.domain.service.post_service import clean_description, clean_title
from folio.domain.value import ImageUpload, PostId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str | None = None
    description: str | None = None
    image: ImageUpload | None = None
    tags: list[str] | str | None = None  # Comma-separated string or list of names


class CreatePostResponse(PostItem):
    """Create post response: the created post with tags populated."""

    pass


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        image_service: ImageService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            image_service: Image domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.image_service = image_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate title, description and tag names
        2. Validate the image (nothing is uploaded if any check fails)
        3. Upload the image (via ImageService)
        4. Resolve tag names to IDs, creating missing tags (via TagService)
        5. Save the post (via PostService)

        Args:
            request: Create post request

        Returns:
            Created post with tags populated

        Raises:
            ValidationError: If any input is missing or invalid
            UpstreamError: If the image upload fails
        """
        with logfire.span("create_post.execute", title=request.title):
            title = clean_title(request.title)
            description = clean_description(request.description)
            if title is None or description is None:
                raise ValidationError("Title and description are required")
            self.tag_service.validate_names(request.tags)

            image = self.image_service.validate(request.image)

            image_url = await self.image_service.upload(image)
            tag_ids = await self.tag_service.resolve_tags(request.tags)

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                description=description,
                image_url=image_url,
                tag_ids=tag_ids,
                created_at=now,
                updated_at=now,
            )

            # A failure past this point leaves the uploaded blob orphaned
            saved_post = await self.post_service.save_post(post)

            logfire.info(
                "Post created successfully",
                post_id=str(saved_post.id),
                tag_count=len(tag_ids),
            )

            item = await populate_post(saved_post, self.tag_service)
            return CreatePostResponse(**item.model_dump())
