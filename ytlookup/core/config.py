"""Application configuration using Pydantic Settings.

This module defines all application configuration loaded from environment variables.
Configuration is validated at startup and provides type-safe access throughout the app.
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration.

    All configuration is loaded from environment variables or .env file.
    Validation happens automatically via Pydantic. The YouTube API key is
    required: building a Config without it raises a ValidationError, so a
    missing credential stops the process at startup.

    Example:
        >>> config = Config(youtube_api_key="key")
        >>> print(config.app_name)
        'YouTube Lookup'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # Application Settings
    # ============================================
    app_name: str = Field(default="YouTube Lookup", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # ============================================
    # YouTube API
    # ============================================
    youtube_api_key: str = Field(
        min_length=1,
        validation_alias=AliasChoices("youtube_api_key", "api_key"),
        description="YouTube Data API v3 key",
    )

    # ============================================
    # Outbound HTTP
    # ============================================
    http_timeout: float = Field(
        default=30.0, description="Upstream request timeout in seconds", gt=0
    )
    http_max_connections: int = Field(
        default=100, description="Maximum pooled connections", ge=1, le=500
    )
    http_max_keepalive_connections: int = Field(
        default=20, description="Maximum keepalive connections", ge=0, le=500
    )

    # ============================================
    # API Server
    # ============================================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3000, description="API server port", ge=1, le=65535)

    # ============================================
    # CORS Settings
    # ============================================
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(default=True, description="Allow CORS credentials")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode.

        Returns:
            True if app_env is 'development'
        """
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if app_env is 'production'
        """
        return self.app_env == "production"


# =============================================================================
# Singleton accessor
# =============================================================================

_config: Config | None = None


def get_config() -> Config:
    """Get the global Config singleton.

    The first call validates the environment; a missing API key raises
    here rather than on the first request.

    Returns:
        The global Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached Config so the next get_config() re-reads the environment."""
    global _config
    _config = None
