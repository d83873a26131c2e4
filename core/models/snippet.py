# =============================================================================
# core/models/snippet.py - Snippet Schemas
# =============================================================================
# These models define the API contract with the playground web client:
# - Snippet: Fluent messages plus variables and setup, optionally persisted
# - ServiceInfo: Identity returned by GET /
# - ErrorResponse: Body of every structured error
#
# `variables` and `setup` are arbitrary JSON values. They are required keys
# but may be null.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Snippet(BaseModel):
    """
    A playground snippet.

    Sent by the client on POST /gists (with "id": null) and returned by
    both gist endpoints with the gist id filled in.

    Example:
        {
            "id": "aa5a315d61ae9438b18d",
            "messages": "hello = Hello, { $name }!",
            "variables": {"name": "World"},
            "setup": {"visible": ["variables"], "locale": "en-US"}
        }
    """

    id: str | None = Field(
        default=None,
        description="Gist id; null until the snippet has been saved"
    )

    messages: str = Field(
        ...,
        description="Fluent source text"
    )

    variables: Any = Field(
        ...,
        description="Variables passed to the messages when formatting"
    )

    setup: Any = Field(
        ...,
        description="Playground configuration (locale, parser options, ...)"
    )

    model_config = ConfigDict(extra="ignore")


class ServiceInfo(BaseModel):
    """Name and version of this service."""
    name: str
    version: str


class ErrorResponse(BaseModel):
    """Structured error body returned for every handled failure."""
    error: str
    code: str
    details: dict[str, Any] | None = None
