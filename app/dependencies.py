# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from lib.gist_client import GistClient


def get_gist_client(request: Request) -> GistClient:
    """
    Get the shared GistClient.

    The client is created once by the app lifespan and stored on app.state.
    """
    client = getattr(request.app.state, "gist_client", None)
    if not isinstance(client, GistClient):
        raise RuntimeError("Gist client has not been initialised")
    return client


# Type alias for dependency injection
GistClientDep = Annotated[GistClient, Depends(get_gist_client)]
