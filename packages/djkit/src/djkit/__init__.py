"""DJ Success Kit shared package - prompts, schemas, client and utilities."""

from .config import Settings, settings
from .models import (
    CreativeContentType,
    EmailFollowUpType,
    EventType,
    ImageAspectRatio,
    McScriptType,
    OutputTone,
    PlaylistType,
    RefinementAction,
    SalesObjectionType,
    SocialMediaPlatform,
    TemplateType,
)
from .schemas import (
    ClientProfile,
    GenerationRequest,
    ImageResult,
    StreamChunk,
    parse_generation_request,
)
from .prompts import build_media_prompt, build_prompt, uses_web_search
from .profiles import LocalStorage, ProfileStore
from .output import TemplateBuffer, VideoPlayback
from .client import ProxyClient, VideoJobState
from .utils import (
    setup_logging,
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

__version__ = "0.1.0"
__all__ = [
    "Settings",
    "settings",
    "CreativeContentType",
    "EmailFollowUpType",
    "EventType",
    "ImageAspectRatio",
    "McScriptType",
    "OutputTone",
    "PlaylistType",
    "RefinementAction",
    "SalesObjectionType",
    "SocialMediaPlatform",
    "TemplateType",
    "ClientProfile",
    "GenerationRequest",
    "ImageResult",
    "StreamChunk",
    "parse_generation_request",
    "build_prompt",
    "build_media_prompt",
    "uses_web_search",
    "LocalStorage",
    "ProfileStore",
    "TemplateBuffer",
    "VideoPlayback",
    "ProxyClient",
    "VideoJobState",
    "setup_logging",
    "DJKitError",
    "ConfigurationError",
    "TransportError",
    "ProviderError",
    "SafetyRejectionError",
    "StreamParseError",
    "VideoFetchError",
    "VideoTimeoutError",
    "ProfileStoreError",
]
