from .requests import (
    CamelModel,
    AgreementRequest,
    DepositTermsRequest,
    EmailFollowUpRequest,
    McScriptRequest,
    SocialMediaPostRequest,
    BlogPostRequest,
    AiImageRequest,
    AiVideoRequest,
    MusicPlaylistRequest,
    SalesAssistantRequest,
    EventChecklistRequest,
    PreEventQuestionnaireRequest,
    PostEventQuestionnaireRequest,
    EventTimelineRequest,
    CreativeContentRequest,
    GenerationRequest,
    generation_request_adapter,
    parse_generation_request,
    ImageGenerationParams,
    VideoGenerationParams,
    VideoStatusParams,
    VideoFetchParams,
)
from .results import WebSource, GroundingChunk, StreamChunk, ImageResult
from .profiles import ClientProfile

__all__ = [
    "CamelModel",
    "AgreementRequest",
    "DepositTermsRequest",
    "EmailFollowUpRequest",
    "McScriptRequest",
    "SocialMediaPostRequest",
    "BlogPostRequest",
    "AiImageRequest",
    "AiVideoRequest",
    "MusicPlaylistRequest",
    "SalesAssistantRequest",
    "EventChecklistRequest",
    "PreEventQuestionnaireRequest",
    "PostEventQuestionnaireRequest",
    "EventTimelineRequest",
    "CreativeContentRequest",
    "GenerationRequest",
    "generation_request_adapter",
    "parse_generation_request",
    "ImageGenerationParams",
    "VideoGenerationParams",
    "VideoStatusParams",
    "VideoFetchParams",
    "WebSource",
    "GroundingChunk",
    "StreamChunk",
    "ImageResult",
    "ClientProfile",
]
