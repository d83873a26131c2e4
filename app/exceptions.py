# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure a request can hit maps to one exception class with a fixed
# HTTP status and machine-readable code, rendered as a small JSON body:
#
#   {"error": "...", "code": "...", "details": {...}}
# =============================================================================

import logging
from typing import Any, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PlaygroundException(Exception):
    """
    Base exception for the playground server.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "PLAYGROUND_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class BadRequestError(PlaygroundException):
    """Raised when the request body is not a valid snippet."""

    def __init__(self, message: str, errors: list[Any] | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            details={"errors": errors} if errors else None,
        )


# =============================================================================
# Gist Content Exceptions
# =============================================================================
# The gist exists but does not look like a playground snippet.

class MissingFieldError(PlaygroundException):
    """Raised when a gist lacks one of the playground files."""

    def __init__(self, file_name: str, gist_id: str | None = None):
        super().__init__(
            message=f"Gist is missing file: {file_name}",
            code="MISSING_FIELD",
            status_code=502,
            details={"file": file_name, "gist_id": gist_id},
        )
        self.file_name = file_name


class MalformedContentError(PlaygroundException):
    """Raised when a playground file in a gist cannot be parsed."""

    def __init__(self, file_name: str, error: str, gist_id: str | None = None):
        super().__init__(
            message=f"Gist file {file_name} is malformed: {error}",
            code="MALFORMED_CONTENT",
            status_code=502,
            details={"file": file_name, "gist_id": gist_id},
        )
        self.file_name = file_name


class SnippetSerializationError(PlaygroundException):
    """Raised when a snippet's JSON values cannot be written to a gist file."""

    def __init__(self, file_name: str, error: str):
        super().__init__(
            message=f"Failed to serialize {file_name}: {error}",
            code="SERIALIZATION_FAILURE",
            status_code=500,
            details={"file": file_name},
        )
        self.file_name = file_name


# =============================================================================
# Provider Exceptions
# =============================================================================

class GistNotFoundError(PlaygroundException):
    """Raised when GitHub has no gist with the requested id."""

    def __init__(self, gist_id: str):
        super().__init__(
            message=f"Gist not found: {gist_id}",
            code="GIST_NOT_FOUND",
            status_code=404,
            details={"gist_id": gist_id},
        )


class ProviderUnavailableError(PlaygroundException):
    """Raised when a GitHub call fails or returns something unusable."""

    def __init__(self, error: str, upstream_status: int | None = None):
        details: dict[str, Any] = {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(
            message=f"Gist provider request failed: {error}",
            code="PROVIDER_UNAVAILABLE",
            status_code=502,
            details=details,
        )
        self.upstream_status = upstream_status


class ProviderTimeoutError(PlaygroundException):
    """Raised when a GitHub call exceeds the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(
            message=f"Gist provider did not respond within {timeout:g}s",
            code="PROVIDER_TIMEOUT",
            status_code=504,
            details={"timeout_seconds": timeout},
        )


# =============================================================================
# Validation Helpers
# =============================================================================

def summarize_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe loc/msg/type entries."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


# =============================================================================
# Exception Handlers
# =============================================================================

async def playground_exception_handler(
    request: Request,
    exc: PlaygroundException
) -> JSONResponse:
    """Convert PlaygroundException to JSON response."""
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Parameter errors are reported as 400 Bad Request rather than
    FastAPI's default 422, matching how invalid snippet bodies are reported.
    """
    return await playground_exception_handler(
        request,
        BadRequestError("Request body is not a valid snippet", errors=summarize_errors(exc.errors())),
    )
