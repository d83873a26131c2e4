# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the playground gist server.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   playground-server            (reads HOST and PORT from the environment)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from app.config import SERVICE_NAME, SERVICE_VERSION, Settings, settings
from app.exceptions import (
    PlaygroundException,
    playground_exception_handler,
    validation_exception_handler,
)
from app.responses import json_response
from app.routers import gists
from core.models.snippet import ServiceInfo
from lib.gist_client import GistClient

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

CORS_ALLOWED_METHODS = ["GET", "POST"]
CORS_ALLOWED_HEADERS = ["Content-Type"]
CORS_MAX_AGE_SECONDS = 60 * 60


def create_app(
    app_settings: Settings = settings,
    gist_client: GistClient | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings to configure CORS and the gist client from
        gist_client: Pre-built client to use instead of creating one at
            startup. An injected client is not closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup: create the shared gist client.
        Shutdown: close its connection pool.
        """
        logger.info(f"Starting {SERVICE_NAME} {SERVICE_VERSION}")
        logger.info(f"CORS origin: {app_settings.CORS_ORIGIN}")
        logger.info(f"Gist provider: {app_settings.GITHUB_API_URL}")

        owns_client = gist_client is None
        app.state.gist_client = gist_client or GistClient.from_settings(app_settings)

        yield

        logger.info(f"Shutting down {SERVICE_NAME}")
        if owns_client:
            await app.state.gist_client.aclose()

    app = FastAPI(
        title="Fluent Playground Gist Server",
        description="Stores and loads Fluent Playground snippets as GitHub gists.",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # Only the playground front end may call the API from a browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.CORS_ORIGIN],
        allow_credentials=False,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
        max_age=CORS_MAX_AGE_SECONDS,
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(PlaygroundException, playground_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        gists.router,
        prefix="/gists",
        tags=["Gists"]
    )

    @app.get("/", tags=["Root"], response_model=ServiceInfo)
    async def root() -> Response:
        """
        Root endpoint - returns service name and version.
        """
        return json_response(ServiceInfo(name=SERVICE_NAME, version=SERVICE_VERSION))

    return app


app = create_app()


def run() -> None:
    """Serve the default app on HOST:PORT."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="debug" if settings.DEBUG else "info")


if __name__ == "__main__":
    run()
