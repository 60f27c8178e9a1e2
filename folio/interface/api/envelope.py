"""JSON response envelope shared by all API routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from folio.application.usecase.common import PaginationInfo

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Response wrapper: ``{success, data?, message?, pagination?}``.

    Routes declare ``response_model_exclude_none=True`` so absent members
    are left out of the JSON body.
    """

    success: bool = True
    data: T | None = None
    message: str | None = None
    pagination: PaginationInfo | None = None
