"""Application configuration using Pydantic Settings."""

import re

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rainbowroad.core.exceptions import ConfigurationError

SERVER_URL_PATTERN = re.compile(r"^https?:")


class RainbowRoadSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="RAINBOW_ROAD_",
        populate_by_name=True,
    )

    # GitHub
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "RAINBOW_ROAD_GITHUB_TOKEN"),
        description="GitHub token (optional, raises the API rate limit)",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )

    # Client side
    server: str | None = Field(
        default=None,
        description="Base URL of the stars server used by the CLI",
    )

    # Resolution
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Deadline for a single upstream call in seconds",
    )
    batch_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Deadline for a whole batch in seconds (unbounded if unset)",
    )
    max_concurrency: int = Field(
        default=16,
        ge=1,
        description="Number of upstream calls allowed in flight per batch",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Address the server binds to")
    port: int = Field(default=9999, ge=1, le=65535, description="Port the server listens on")

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


def resolve_server_url(settings: RainbowRoadSettings) -> str:
    """
    Return the configured stars server URL.

    Raises:
        ConfigurationError: if RAINBOW_ROAD_SERVER is unset or not an http(s) URL
    """
    if not settings.server:
        raise ConfigurationError("RAINBOW_ROAD_SERVER environment variable not set")
    if not SERVER_URL_PATTERN.match(settings.server):
        raise ConfigurationError(
            f"RAINBOW_ROAD_SERVER environment variable invalid: {settings.server}"
        )
    return settings.server.rstrip("/")
