"""Mapping of gateway errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ytlookup.api.schemas import ErrorResponse
from ytlookup.core.exceptions import (
    InvalidRequestError,
    LookupNotFoundError,
    YouTubeError,
    YouTubeErrorKind,
)
from ytlookup.core.logging import get_logger

logger = get_logger(__name__)


def youtube_error_status(kind: YouTubeErrorKind) -> tuple[int, str]:
    """Return the HTTP status and message for an upstream failure kind."""
    match kind:
        case YouTubeErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND, "Not found"
        case YouTubeErrorKind.RATELIMITED:
            return status.HTTP_429_TOO_MANY_REQUESTS, "Rate limited"
        case YouTubeErrorKind.UNAUTHORIZED:
            return status.HTTP_401_UNAUTHORIZED, "Unauthorized"
        case YouTubeErrorKind.FORBIDDEN:
            return status.HTTP_403_FORBIDDEN, "Forbidden"
        case YouTubeErrorKind.SUBSCRIPTIONS_PRIVATE:
            return status.HTTP_403_FORBIDDEN, "Subscriptions are private"
        case YouTubeErrorKind.ACCOUNT_CLOSED:
            return status.HTTP_410_GONE, "Account is closed"
        case YouTubeErrorKind.ACCOUNT_TERMINATED:
            return status.HTTP_410_GONE, "Account is terminated"
        case YouTubeErrorKind.INTERNAL_SERVER_ERROR:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        case YouTubeErrorKind.UNKNOWN_STATUS:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Unknown upstream status code"
        case YouTubeErrorKind.PARSE_ERROR:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Could not parse upstream response"
        case YouTubeErrorKind.TRANSPORT:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Upstream request failed"


def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def youtube_error_handler(request: Request, exc: YouTubeError) -> JSONResponse:
    status_code, message = youtube_error_status(exc.kind)
    if status_code >= 500:
        logger.error("Upstream failure", path=request.url.path, **exc.to_dict())
    return _error(status_code, ErrorResponse(error=exc.kind.value, message=message))


async def lookup_not_found_handler(request: Request, exc: LookupNotFoundError) -> JSONResponse:
    return _error(
        status.HTTP_404_NOT_FOUND,
        ErrorResponse(
            error="not_found",
            message=str(exc),
            reason=exc.reason.value if exc.reason else None,
        ),
    )


async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
    return _error(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="invalid_request", message=str(exc)),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies as invalid_request instead of FastAPI's 422."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return _error(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="invalid_request", message=details or "Invalid request"),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer any error outside the gateway taxonomy with a coded 500."""
    logger.exception("Unhandled error", path=request.url.path, error_type=type(exc).__name__)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="unknown_error", message="Unknown error occurred"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the gateway's exception handlers on an application."""
    app.add_exception_handler(YouTubeError, youtube_error_handler)
    app.add_exception_handler(LookupNotFoundError, lookup_not_found_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["register_error_handlers", "youtube_error_status"]
