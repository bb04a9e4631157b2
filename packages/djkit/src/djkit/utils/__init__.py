from .errors import (
    DJKitError,
    ConfigurationError,
    TransportError,
    ProviderError,
    SafetyRejectionError,
    StreamParseError,
    VideoFetchError,
    VideoTimeoutError,
    ProfileStoreError,
)
from .logging import setup_logging, JSONFormatter

__all__ = [
    "DJKitError",
    "ConfigurationError",
    "TransportError",
    "ProviderError",
    "SafetyRejectionError",
    "StreamParseError",
    "VideoFetchError",
    "VideoTimeoutError",
    "ProfileStoreError",
    "setup_logging",
    "JSONFormatter",
]
