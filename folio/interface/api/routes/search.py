"""Search routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from folio.application.usecase.common import PostItem
from folio.application.usecase.search import SearchPostsRequest, SearchPostsUseCase
from folio.domain.error import DomainError
from folio.interface.api.envelope import Envelope
from folio.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/search", tags=["search"], route_class=DishkaRoute)


@router.get(
    "",
    response_model=Envelope[list[PostItem]],
    response_model_exclude_none=True,
)
async def search_posts(
    use_case: FromDishka[SearchPostsUseCase],
    q: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> Envelope[list[PostItem]]:
    """Search posts by a substring of their title or description.

    Example:
        GET /api/search?q=paris&page=1&limit=10
    """
    try:
        result = await use_case.execute(
            SearchPostsRequest(query=q, page=page, limit=limit)
        )
    except DomainError as e:
        raise to_http_exception(e, "Server error while searching posts")
    except Exception as e:
        logfire.error("Unexpected error searching posts", query=q, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while searching posts",
        )

    return Envelope(data=result.posts, pagination=result.pagination)
