"""Unified configuration for the client tools and the proxy backend."""

from pydantic_settings import BaseSettings
import logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The backend extends this class with provider-specific settings; the
    client-side transport, polling loop and profile store read it directly.
    """

    # ===== PROXY =====
    PROXY_URL: str = "http://localhost:8000/api/geminiProxy"
    """Full URL of the generation proxy endpoint."""

    REQUEST_TIMEOUT_SECONDS: float = 120.0
    """Timeout for a single request to the proxy."""

    # ===== STREAMING =====
    STREAM_MAX_CONSECUTIVE_PARSE_ERRORS: int = 5
    """Malformed stream frames tolerated in a row before the stream fails."""

    # ===== VIDEO POLLING =====
    VIDEO_POLL_INTERVAL_SECONDS: float = 10.0
    """Delay between two video status checks."""

    VIDEO_MAX_POLLS: int = 90
    """Maximum number of status checks before giving up (15 min at 10s)."""

    VIDEO_TIMEOUT_SECONDS: float = 900.0
    """Overall time budget for a video generation."""

    # ===== LOCAL STORAGE =====
    LOCAL_STORAGE_PATH: str = "~/.djkit/local_storage.json"
    """Durable key/value file used in place of browser local storage."""

    PROFILES_STORAGE_KEY: str = "djSuccessKit_profiles"
    """Key holding the JSON array of saved client profiles."""

    # ===== LOGGING =====
    LOG_LEVEL: str = logging.getLevelName(logging.INFO)
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

    # ===== APPLICATION =====
    ENV: str = "development"
    """Environment: development, staging, production."""

    DEBUG: bool = False
    """Enable debug mode."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Singleton instance
settings = Settings()

__all__ = ["Settings", "settings"]
