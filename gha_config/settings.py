"""
Application Settings (Pydantic Settings).

Loads configuration from the process environment. The server has no
configuration file and keeps no state on disk; the host launching it
passes the credential through the environment, e.g.:

    GITHUB_PERSONAL_ACCESS_TOKEN=ghp_... github-actions-mcp
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # GITHUB
    # ========================================================================
    GITHUB_PERSONAL_ACCESS_TOKEN: str = Field(
        default="",
        description="Bearer token for the GitHub REST API (Authorization header omitted when empty)",
    )
    GITHUB_REQUEST_TIMEOUT_MS: int = Field(
        default=30000,
        gt=0,
        description="Per-call timeout in milliseconds",
    )
    GITHUB_RATE_LIMIT_PER_MINUTE: int = Field(
        default=60,
        gt=0,
        description="Client-side ceiling of requests admitted per 60-second window",
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")
