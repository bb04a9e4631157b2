from .enums import (
    EventType,
    TemplateType,
    EmailFollowUpType,
    OutputTone,
    RefinementAction,
    CreativeContentType,
    McScriptType,
    SocialMediaPlatform,
    PlaylistType,
    SalesObjectionType,
    ImageAspectRatio,
    FORM_TEMPLATE_TYPES,
)

__all__ = [
    "EventType",
    "TemplateType",
    "EmailFollowUpType",
    "OutputTone",
    "RefinementAction",
    "CreativeContentType",
    "McScriptType",
    "SocialMediaPlatform",
    "PlaylistType",
    "SalesObjectionType",
    "ImageAspectRatio",
    "FORM_TEMPLATE_TYPES",
]
