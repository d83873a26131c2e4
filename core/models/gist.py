# =============================================================================
# core/models/gist.py - GitHub Gist Schemas
# =============================================================================
# The subset of the GitHub gist resource this service reads and writes:
# - GistFile: One file inside a gist (content may be null or truncated)
# - Gist: A gist as returned by GET /gists/{id} and POST /gists
# - GistCreate: Request body for POST /gists
#
# GitHub returns many more fields (owner, history, forks, ...). They are
# ignored on parse.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class GistFile(BaseModel):
    """A single file inside a gist."""

    filename: str | None = None
    content: str | None = None
    # GitHub cuts content off for large files and sets this flag
    truncated: bool = False

    model_config = ConfigDict(extra="ignore")


class Gist(BaseModel):
    """
    A gist as returned by the GitHub API.

    Example (abridged):
        {
            "id": "aa5a315d61ae9438b18d",
            "description": "A Fluent Playground snippet",
            "public": true,
            "html_url": "https://gist.github.com/aa5a315d61ae9438b18d",
            "files": {
                "playground.ftl": {"filename": "playground.ftl", "content": "..."}
            }
        }
    """

    id: str = Field(..., min_length=1)
    description: str | None = None
    public: bool | None = None
    html_url: str | None = None
    files: dict[str, GistFile] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")


class GistFileContent(BaseModel):
    """File body sent when creating a gist."""
    content: str


class GistCreate(BaseModel):
    """Request body for creating a gist."""

    description: str
    public: bool
    files: dict[str, GistFileContent]
