# =============================================================================
# lib/gist_client.py - GitHub Gist Client Wrapper
# =============================================================================
# Typed async wrapper around the two GitHub gist endpoints this service uses:
# - GET /gists/{id}
# - POST /gists
#
# One GistClient is created at startup and shared by every request. It holds
# an httpx.AsyncClient (connection pool + credential) and nothing mutable.
# Each call is exactly one round trip with a bounded timeout and no retry.
#
# Usage:
#   client = GistClient.from_settings(settings)
#   gist = await client.fetch("aa5a315d61ae9438b18d")
#   await client.aclose()
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.exceptions import (
    GistNotFoundError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from core.models.gist import Gist, GistCreate

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class GistClientConfig:
    """Connection settings for the GitHub API."""

    token: str
    base_url: str = "https://api.github.com"
    timeout: float = 5.0
    user_agent: str = "fluent-playground-server"

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": self.user_agent,
        }


class GistClient:
    """
    Read and create gists on GitHub.

    Errors are translated into the application's exception types:
    - 404 on fetch -> GistNotFoundError
    - timeout -> ProviderTimeoutError
    - anything else (non-2xx, network failure, unexpected body)
      -> ProviderUnavailableError
    """

    def __init__(
        self,
        config: GistClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers(),
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GistClient:
        config = GistClientConfig(
            token=settings.GITHUB_API_TOKEN,
            base_url=settings.GITHUB_API_URL,
            timeout=settings.GITHUB_TIMEOUT_SECONDS,
            user_agent=settings.user_agent,
        )
        return cls(config, transport=transport)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    # -------------------------------------------------------------------------
    # Gist Operations
    # -------------------------------------------------------------------------

    async def fetch(self, gist_id: str) -> Gist:
        """
        Fetch a gist by id.

        Raises:
            GistNotFoundError: If GitHub has no such gist
            ProviderTimeoutError: If GitHub does not answer in time
            ProviderUnavailableError: For any other failure
        """
        response = await self._request("GET", f"/gists/{quote(gist_id, safe='')}")
        if response.status_code == 404:
            logger.info(f"Gist not found: {gist_id}")
            raise GistNotFoundError(gist_id)
        return self._parse_gist(response)

    async def create(self, record: GistCreate) -> Gist:
        """
        Create a gist and return GitHub's copy of it, including its new id.

        Raises:
            ProviderTimeoutError: If GitHub does not answer in time
            ProviderUnavailableError: For any other failure
        """
        response = await self._request("POST", "/gists", json=record.model_dump())
        gist = self._parse_gist(response)
        logger.info(f"Created gist {gist.id}")
        return gist

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"GitHub {method} {url} timed out after {self.config.timeout}s")
            raise ProviderTimeoutError(self.config.timeout) from e
        except httpx.HTTPError as e:
            logger.error(f"GitHub {method} {url} failed: {e}")
            raise ProviderUnavailableError(str(e) or type(e).__name__) from e

    def _parse_gist(self, response: httpx.Response) -> Gist:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"GitHub {response.request.method} {response.request.url.path} "
                f"returned HTTP {response.status_code}: {response.text[:200]}"
            )
            raise ProviderUnavailableError(
                f"GitHub returned HTTP {response.status_code}",
                upstream_status=response.status_code,
            ) from e

        try:
            return Gist.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected gist payload from GitHub: {e}")
            raise ProviderUnavailableError(
                "GitHub returned an unexpected response body",
                upstream_status=response.status_code,
            ) from e
