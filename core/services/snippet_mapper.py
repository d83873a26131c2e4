# =============================================================================
# core/services/snippet_mapper.py - Snippet <-> Gist Mapping
# =============================================================================
# A snippet is stored as a gist with three files:
# - playground.ftl: the Fluent messages, verbatim
# - playground.json: the variables, as JSON
# - setup.json: the playground setup, as JSON
#
# Both directions are pure functions: no I/O.
# =============================================================================

import json
import logging
from typing import Any

from app.exceptions import (
    MalformedContentError,
    MissingFieldError,
    SnippetSerializationError,
)
from core.models.gist import Gist, GistCreate, GistFileContent
from core.models.snippet import Snippet

logger = logging.getLogger(__name__)

MESSAGES_FILE = "playground.ftl"
VARIABLES_FILE = "playground.json"
SETUP_FILE = "setup.json"

GIST_DESCRIPTION = "A Fluent Playground snippet"
GIST_PUBLIC = True


def _dump_json(value: Any, file_name: str) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SnippetSerializationError(file_name, str(e)) from e


def to_gist(snippet: Snippet) -> GistCreate:
    """
    Build the gist creation payload for a snippet.

    The snippet id is not stored; GitHub assigns a new one.

    Raises:
        SnippetSerializationError: If variables or setup are not JSON-serializable
    """
    return GistCreate(
        description=GIST_DESCRIPTION,
        public=GIST_PUBLIC,
        files={
            MESSAGES_FILE: GistFileContent(content=snippet.messages),
            VARIABLES_FILE: GistFileContent(content=_dump_json(snippet.variables, VARIABLES_FILE)),
            SETUP_FILE: GistFileContent(content=_dump_json(snippet.setup, SETUP_FILE)),
        },
    )


def _file_content(gist: Gist, file_name: str) -> str:
    gist_file = gist.files.get(file_name)
    if gist_file is None or gist_file.content is None:
        raise MissingFieldError(file_name, gist_id=gist.id)
    if gist_file.truncated:
        raise MalformedContentError(file_name, "content truncated by provider", gist_id=gist.id)
    return gist_file.content


def _load_json(gist: Gist, file_name: str) -> Any:
    content = _file_content(gist, file_name)
    try:
        return json.loads(content)
    except ValueError as e:
        logger.debug(f"Gist {gist.id}: {file_name} is not valid JSON: {e}")
        raise MalformedContentError(file_name, str(e), gist_id=gist.id) from e


def from_gist(gist: Gist) -> Snippet:
    """
    Rebuild a snippet from a gist.

    Raises:
        MissingFieldError: If one of the three playground files is absent
        MalformedContentError: If a JSON file does not parse or was truncated
    """
    messages = _file_content(gist, MESSAGES_FILE)
    variables = _load_json(gist, VARIABLES_FILE)
    setup = _load_json(gist, SETUP_FILE)
    return Snippet(id=gist.id, messages=messages, variables=variables, setup=setup)
