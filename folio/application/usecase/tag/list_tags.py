"""List tags use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import TagDetail
from folio.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    pass


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagDetail]


class ListTagsUseCase(BaseUseCase[ListTagsRequest, ListTagsResponse]):
    """Use case for listing all tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            All tags sorted by name
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_all_tags()
            tag_items = [TagDetail.from_tag(tag) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
