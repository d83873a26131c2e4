# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
# A single Settings class holds every value the server needs at startup.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# GITHUB_API_TOKEN is required: the process refuses to start without it.
# =============================================================================

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reported by GET / and sent to GitHub as the User-Agent
SERVICE_NAME = "fluent-playground-server"
SERVICE_VERSION = "0.1.0"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # GitHub (gist provider)
    # -------------------------------------------------------------------------

    GITHUB_API_TOKEN: str = Field(
        ...,
        min_length=1,
        description="GitHub token used to read and create gists"
    )

    GITHUB_API_URL: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API"
    )

    GITHUB_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Timeout applied to every GitHub call"
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    # Exactly one trusted origin: the playground front end.

    CORS_ORIGIN: str = Field(
        default="https://projectfluent.org",
        description="The single origin allowed to call this API from a browser"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def user_agent(self) -> str:
        """User-Agent header for GitHub requests, e.g. "fluent-playground-server/0.1.0"."""
        return f"{SERVICE_NAME}/{SERVICE_VERSION}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The environment is parsed and validated once; a missing token raises
    pydantic.ValidationError here, before the server binds its port.
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
