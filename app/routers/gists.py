# =============================================================================
# app/routers/gists.py - Playground Gist Endpoints
# =============================================================================
# GET  /gists/{gist_id}  load a saved snippet
# POST /gists            save a snippet as a new gist
#
# Failures are raised as PlaygroundException subclasses and rendered by the
# handlers registered in main.py.
# =============================================================================

from fastapi import APIRouter, Path, Request, Response
from pydantic import ValidationError

from app.dependencies import GistClientDep
from app.exceptions import BadRequestError, summarize_errors
from app.responses import json_response
from core.models.snippet import ErrorResponse, Snippet
from core.services.playground_service import PlaygroundService

router = APIRouter()

# GitHub gist ids are hex; letters, digits, '_' and '-' only
GIST_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Gist not found"},
    502: {"model": ErrorResponse, "description": "Gist provider failed or gist is not a playground snippet"},
    504: {"model": ErrorResponse, "description": "Gist provider timed out"},
}


@router.get(
    "/{gist_id}",
    response_model=Snippet,
    responses=_ERROR_RESPONSES,
)
async def fetch_snippet(
    client: GistClientDep,
    gist_id: str = Path(..., pattern=GIST_ID_PATTERN, description="GitHub gist id"),
) -> Response:
    """
    Load a playground snippet from a gist.
    """
    snippet = await PlaygroundService.fetch(client, gist_id)
    return json_response(snippet)


@router.post(
    "",
    response_model=Snippet,
    responses={
        400: {"model": ErrorResponse, "description": "Request body is not a valid snippet"},
        **_ERROR_RESPONSES,
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": Snippet.model_json_schema()}},
        }
    },
)
async def create_snippet(request: Request, client: GistClientDep) -> Response:
    """
    Save a playground snippet as a new public gist.

    The body is read as text and parsed as JSON whatever its Content-Type.
    Any "id" in the body is ignored. The response echoes the snippet as
    stored, with the new gist id.
    """
    body = await request.body()
    try:
        snippet = Snippet.model_validate_json(body)
    except ValidationError as e:
        raise BadRequestError(
            "Request body is not a valid snippet",
            errors=summarize_errors(e.errors()),
        ) from e

    saved = await PlaygroundService.create(client, snippet)
    return json_response(saved)
