"""
Custom exception classes and RFC 7807 error handling.

The summary pipeline raises one typed error per stage:

- ``ExtractionError`` when a transcript cannot be obtained,
- ``SummarizationError`` when the LLM call fails,
- ``PersistenceError`` when the summary record cannot be written or removed.

None of them are retried; they propagate to the API layer and are rendered
as problem details.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class RateLimitError(AppException):
    """Rate limit exceeded exception."""

    def __init__(self, detail: str = "Rate limit exceeded. Please try again later."):
        super().__init__(
            status_code=429,
            error_type="https://problems.example.com/rate-limit-exceeded",
            title="Too Many Requests",
            detail=detail,
        )


class ExtractionError(AppException):
    """Transcript could not be extracted (bad URL, unreachable source, no captions)."""

    def __init__(self, detail: str, status_code: int = 502):
        super().__init__(
            status_code=status_code,
            error_type="https://problems.example.com/extraction-failed",
            title="Transcript Extraction Failed",
            detail=detail,
        )


class SummarizationError(AppException):
    """LLM summary could not be generated (provider error, missing credentials)."""

    def __init__(self, detail: str, status_code: int = 502):
        super().__init__(
            status_code=status_code,
            error_type="https://problems.example.com/summarization-failed",
            title="Summary Generation Failed",
            detail=detail,
        )


class PersistenceError(AppException):
    """Summary record could not be written, found or deleted."""

    def __init__(self, detail: str, status_code: int = 500):
        super().__init__(
            status_code=status_code,
            error_type="https://problems.example.com/persistence-failed",
            title="Storage Operation Failed",
            detail=detail,
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render slowapi rate limit breaches as RFC 7807 responses."""
    return await app_exception_handler(
        request, RateLimitError(f"Rate limit exceeded: {exc.detail}")
    )
