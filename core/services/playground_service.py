# =============================================================================
# core/services/playground_service.py - Playground Snippet Operations
# =============================================================================
# Loads and saves playground snippets through the gist client.
# Separates HTTP concerns from the gist round trip and mapping.
# =============================================================================

import logging

from core.models.snippet import Snippet
from core.services import snippet_mapper
from lib.gist_client import GistClient

logger = logging.getLogger(__name__)


class PlaygroundService:
    """
    Service for playground snippet operations.

    Each operation makes exactly one GitHub call. Errors from the client
    and the mapper propagate unchanged; the API layer renders them.
    """

    @staticmethod
    async def fetch(client: GistClient, gist_id: str) -> Snippet:
        """
        Load the snippet stored in a gist.

        Raises:
            GistNotFoundError, ProviderTimeoutError, ProviderUnavailableError:
                If the gist cannot be read
            MissingFieldError, MalformedContentError:
                If the gist is not a playground snippet
        """
        gist = await client.fetch(gist_id)
        return snippet_mapper.from_gist(gist)

    @staticmethod
    async def create(client: GistClient, snippet: Snippet) -> Snippet:
        """
        Save a snippet as a new gist.

        Any id on the incoming snippet is ignored; the returned snippet
        carries the id GitHub assigned.
        """
        record = snippet_mapper.to_gist(snippet)
        gist = await client.create(record)
        logger.debug(f"Saved playground snippet as gist {gist.id}")
        return snippet_mapper.from_gist(gist)
