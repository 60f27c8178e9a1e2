"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile, status

from folio.application.usecase.common import PostItem
from folio.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from folio.domain.error import DomainError
from folio.domain.service import MAX_IMAGE_BYTES
from folio.domain.value import ImageUpload
from folio.interface.api.envelope import Envelope
from folio.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


async def read_image(image: UploadFile | None) -> ImageUpload | None:
    """Read an uploaded file into an ImageUpload.

    An empty file part without a filename counts as no image. The body is
    only read when the declared size fits ``MAX_IMAGE_BYTES``; an oversized
    part is passed on with empty content and rejected by the image service.
    """
    if image is None:
        return None

    size = image.size
    if size is not None and size > MAX_IMAGE_BYTES:
        content = b""
    else:
        # Bounded read so a part without a declared size still fails validation
        content = await image.read(MAX_IMAGE_BYTES + 1)
        if size is None:
            size = len(content)

    if not image.filename and not size:
        return None

    return ImageUpload(
        content=content,
        media_type=image.content_type or "",
        size=size,
        filename=image.filename or None,
    )


def raw_tags(tags: list[str] | None) -> list[str] | str | None:
    """Interpret the multipart ``tags`` field.

    Sent once it is a comma-separated string; sent several times it is a
    list of names.
    """
    if tags is None:
        return None
    if len(tags) == 1:
        return tags[0]
    return tags


@router.get(
    "",
    response_model=Envelope[list[PostItem]],
    response_model_exclude_none=True,
)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    tags: str | None = None,
) -> Envelope[list[PostItem]]:
    """List posts with pagination, sorting and tag filtering.

    Example:
        GET /api/posts?page=2&limit=5&sortBy=title&sortOrder=asc&tags=travel,food
    """
    try:
        result = await use_case.execute(
            ListPostsRequest(
                page=page,
                limit=limit,
                sort_by=sort_by,
                sort_order=sort_order,
                tags=tags,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Server error while fetching posts")
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching posts",
        )

    return Envelope(data=result.posts, pagination=result.pagination)


@router.post(
    "",
    response_model=Envelope[PostItem],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    use_case: FromDishka[CreatePostUseCase],
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    tags: list[str] | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> Envelope[PostItem]:
    """Create a post from a multipart form.

    The image is uploaded to the blob store before the post is saved.
    """
    try:
        result = await use_case.execute(
            CreatePostRequest(
                title=title,
                description=description,
                image=await read_image(image),
                tags=raw_tags(tags),
            )
        )
    except DomainError as e:
        logfire.warn("Post creation failed", error=str(e))
        raise to_http_exception(e, "Server error while creating post")
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating post",
        )

    return Envelope(data=result, message="Post created successfully")


@router.get(
    "/{post_id}",
    response_model=Envelope[PostItem],
    response_model_exclude_none=True,
)
async def get_post(
    post_id: str,
    use_case: FromDishka[GetPostUseCase],
) -> Envelope[PostItem]:
    """Get a single post with its tags."""
    try:
        result = await use_case.execute(GetPostRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e, "Server error while fetching post")
    except Exception as e:
        logfire.error("Unexpected error fetching post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching post",
        )

    return Envelope(data=result)


@router.put(
    "/{post_id}",
    response_model=Envelope[PostItem],
    response_model_exclude_none=True,
)
async def update_post(
    post_id: str,
    use_case: FromDishka[UpdatePostUseCase],
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    tags: list[str] | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> Envelope[PostItem]:
    """Update a post from a multipart form.

    Empty fields keep their current value. A new image replaces the old one,
    which is then removed from the blob store.
    """
    try:
        result = await use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                title=title,
                description=description,
                image=await read_image(image),
                tags=raw_tags(tags),
            )
        )
    except DomainError as e:
        logfire.warn("Post update failed", post_id=post_id, error=str(e))
        raise to_http_exception(e, "Server error while updating post")
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while updating post",
        )

    return Envelope(data=result, message="Post updated successfully")


@router.delete(
    "/{post_id}",
    response_model=Envelope[None],
    response_model_exclude_none=True,
)
async def delete_post(
    post_id: str,
    use_case: FromDishka[DeletePostUseCase],
) -> Envelope[None]:
    """Delete a post and its image."""
    try:
        await use_case.execute(DeletePostRequest(post_id=post_id))
    except DomainError as e:
        logfire.warn("Post deletion failed", post_id=post_id, error=str(e))
        raise to_http_exception(e, "Server error while deleting post")
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while deleting post",
        )

    return Envelope(message="Post deleted successfully")
