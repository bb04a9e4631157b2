"""Backend-specific configuration extending shared settings."""

from djkit import Settings as SharedSettings
from typing import Optional


class Settings(SharedSettings):
    """Proxy settings extending shared configuration.

    Holds the provider credential; it is read from the environment only and
    never accepted from requests.
    """

    # ===== API SETTINGS =====
    API_HOST: str = "localhost"
    """API host address."""

    API_PORT: int = 8000
    """API port number."""

    CORS_ORIGINS: str = "*"
    """Comma-separated list of allowed origins."""

    # ===== GEMINI =====
    GEMINI_API_KEY: Optional[str] = None
    """Provider credential for text, image and video generation."""

    TEXT_MODEL: str = "gemini-2.5-flash"
    """Model for streamed text generation."""

    IMAGE_MODEL: str = "imagen-3.0-generate-002"
    """Model for image generation."""

    VIDEO_MODEL: str = "veo-2.0-generate-001"
    """Model for video generation."""

    TEMPERATURE: float = 0.7
    TOP_P: float = 0.95

    # ===== VIDEO DOWNLOAD =====
    VIDEO_DOWNLOAD_TIMEOUT_SECONDS: float = 300.0
    """Timeout for re-fetching a generated video from the provider."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Singleton instance
settings = Settings()
