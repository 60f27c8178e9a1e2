"""Create tag use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import TagDetail
from folio.domain.service import TagService


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str | None = None


class CreateTagResponse(TagDetail):
    """Create tag response: the created tag."""

    pass


class CreateTagUseCase(BaseUseCase[CreateTagRequest, CreateTagResponse]):
    """Use case for creating a tag explicitly."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            Created tag

        Raises:
            ValidationError: If the name is blank or too long
            ConflictError: If a tag with the same slug exists
        """
        with logfire.span("create_tag.execute", tag_name=request.name):
            tag = await self.tag_service.create_tag(request.name)
            detail = TagDetail.from_tag(tag)
            return CreateTagResponse(**detail.model_dump())
