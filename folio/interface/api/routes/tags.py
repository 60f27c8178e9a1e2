"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from folio.application.usecase.common import TagDetail
from folio.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
)
from folio.domain.error import DomainError
from folio.interface.api.envelope import Envelope
from folio.interface.api.errors import to_http_exception

router = APIRouter(
    prefix="/api/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


class CreateTagAPIRequest(BaseModel):
    """API request for creating a tag."""

    name: str | None = None


@router.get(
    "",
    response_model=Envelope[list[TagDetail]],
    response_model_exclude_none=True,
    summary="List all tags",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> Envelope[list[TagDetail]]:
    """List all tags sorted by name."""
    with logfire.span("api.list_tags"):
        try:
            result = await use_case.execute(ListTagsRequest())
        except Exception as e:
            logfire.error("Unexpected error listing tags", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Server error while fetching tags",
            )

        return Envelope(data=result.tags)


@router.post(
    "",
    response_model=Envelope[TagDetail],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
)
async def create_tag(
    request: CreateTagAPIRequest,
    use_case: FromDishka[CreateTagUseCase],
) -> Envelope[TagDetail]:
    """Create a tag.

    Example:
        POST /api/tags {"name": "Machine Learning"}
    """
    try:
        result = await use_case.execute(CreateTagRequest(name=request.name))
    except DomainError as e:
        logfire.warn("Tag creation failed", error=str(e))
        raise to_http_exception(e, "Server error while creating tag")
    except Exception as e:
        logfire.error("Unexpected error creating tag", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating tag",
        )

    return Envelope(data=result, message="Tag created successfully")
