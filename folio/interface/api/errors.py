"""Translation of errors into HTTP responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)


def to_http_exception(error: DomainError, fallback: str) -> HTTPException:
    """Map a domain error to an HTTPException.

    Args:
        error: Domain error raised by a use case
        fallback: Generic message for server-side failures

    Returns:
        HTTPException carrying the status code and message
    """
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, UpstreamError):
        logfire.error("Upstream failure", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=fallback
    )


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPExceptions as failure envelopes."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        # No route matched the path
        return _envelope(exc.status_code, "Route not found")
    return _envelope(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests as 400 failure envelopes."""
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logfire.warn("Request validation failed", path=request.url.path, errors=problems)
    return _envelope(status.HTTP_400_BAD_REQUEST, "; ".join(problems))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as a 500 failure envelope."""
    logfire.error(
        "Unhandled error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!")


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering error handlers on an app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
