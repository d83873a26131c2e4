# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Fakes the GitHub gist API with httpx.MockTransport
# - Provides a TestClient wired to the fake
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("GITHUB_API_TOKEN", "test-github-token")
os.environ.setdefault("CORS_ORIGIN", "https://projectfluent.org")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import create_app
from lib.gist_client import GistClient


# =============================================================================
# Fake GitHub
# =============================================================================

class FakeGitHub:
    """
    In-memory stand-in for the gist endpoints.

    Records every request it receives. Gists are stored by id; POST /gists
    assigns ids "gist-1", "gist-2", ...
    """

    def __init__(self):
        self.gists: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        # Set to force a status code (or exception) for the next requests
        self.fail_status: int | None = None
        self.fail_exception: Exception | None = None

    def add_gist(self, gist_id: str, files: dict[str, str | None]) -> dict:
        gist = {
            "id": gist_id,
            "description": "A Fluent Playground snippet",
            "public": True,
            "html_url": f"https://gist.github.com/{gist_id}",
            "owner": {"login": "octocat"},
            "files": {
                name: {"filename": name, "type": "text/plain", "content": content, "truncated": False}
                for name, content in files.items()
            },
        }
        self.gists[gist_id] = gist
        return gist

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_exception is not None:
            raise self.fail_exception
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"message": "Server Error"})

        path = request.url.path
        if request.method == "GET" and path.startswith("/gists/"):
            gist = self.gists.get(path.removeprefix("/gists/"))
            if gist is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=gist)

        if request.method == "POST" and path == "/gists":
            body = json.loads(request.content)
            gist_id = f"gist-{len(self.gists) + 1}"
            files = {name: entry["content"] for name, entry in body["files"].items()}
            gist = self.add_gist(gist_id, files)
            gist["description"] = body["description"]
            gist["public"] = body["public"]
            return httpx.Response(201, json=gist)

        return httpx.Response(404, json={"message": "Not Found"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_github():
    """Fresh fake GitHub for each test."""
    return FakeGitHub()


@pytest.fixture
def gist_client(fake_github):
    """GistClient talking to the fake GitHub."""
    return GistClient.from_settings(settings, transport=fake_github.transport())


@pytest.fixture
def client(gist_client):
    """TestClient for an app using the fake-backed gist client."""
    app = create_app(settings, gist_client=gist_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def playground_files():
    """The three files of a valid playground gist."""
    return {
        "playground.ftl": "hello = Hello, { $name }!",
        "playground.json": '{"name":"World"}',
        "setup.json": '{"visible":["variables"]}',
    }
