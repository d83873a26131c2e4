# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - snippet.py: Snippet exchanged with the web client, service info, errors
# - gist.py: The GitHub gist resource the snippet is stored as
#
# These models define the "contract" between API, clients and GitHub.
# =============================================================================

from .gist import (
    Gist,
    GistCreate,
    GistFile,
    GistFileContent,
)
from .snippet import (
    ErrorResponse,
    ServiceInfo,
    Snippet,
)

__all__ = [
    # Gist
    "Gist",
    "GistCreate",
    "GistFile",
    "GistFileContent",
    # Snippet
    "ErrorResponse",
    "ServiceInfo",
    "Snippet",
]
