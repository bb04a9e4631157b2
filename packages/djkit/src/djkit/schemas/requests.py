"""Type-safe generation request definitions.

A `GenerationRequest` is a tagged union keyed by `templateType`; creative
content is a second union nested under it, keyed by `creativeContentType`.
Each variant only declares the fields its prompt template reads, so
irrelevant form fields can never reach the prompt builder.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

from ..models import (
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


class CamelModel(BaseModel):
    """Base model speaking camelCase on the wire and snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True
        use_enum_values = False


class _GenerationRequestBase(CamelModel):
    """Fields shared by every template variant."""

    event_type: EventType = EventType.WEDDING
    tone: OutputTone = OutputTone.PROFESSIONAL
    brand_voice: Optional[str] = None

    is_refinement: bool = False
    refinement_action: Optional[RefinementAction] = None
    original_text: Optional[str] = None

    @model_validator(mode="after")
    def _check_refinement(self):
        if self.is_refinement and (not self.refinement_action or not self.original_text):
            raise ValueError(
                "Refinement requests need both a refinementAction and the originalText to refine."
            )
        return self


class AgreementRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.AGREEMENT.value] = TemplateType.AGREEMENT.value
    dj_name: Optional[str] = None
    client_name: Optional[str] = None
    event_date: Optional[str] = None
    venue: Optional[str] = None
    total_cost: Optional[str] = None
    deposit_amount: Optional[str] = None


class DepositTermsRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.DEPOSIT_TERMS.value] = TemplateType.DEPOSIT_TERMS.value
    total_cost: Optional[str] = None
    deposit_amount: Optional[str] = None
    deposit_due_date: Optional[str] = None
    payment_methods: Optional[str] = None


class EmailFollowUpRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.EMAIL_FOLLOW_UP.value] = TemplateType.EMAIL_FOLLOW_UP.value
    email_follow_up_type: EmailFollowUpType = EmailFollowUpType.PRE_BOOKING
    dj_name: Optional[str] = None
    client_name: Optional[str] = None
    event_date: Optional[str] = None


class McScriptRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.CREATIVE_CONTENT.value] = TemplateType.CREATIVE_CONTENT.value
    creative_content_type: Literal[CreativeContentType.MC_SCRIPTS.value] = CreativeContentType.MC_SCRIPTS.value
    mc_script_type: McScriptType = McScriptType.GRAND_ENTRANCE
    client_name: Optional[str] = None
    dj_name: Optional[str] = None
    client_fun_facts: Optional[str] = None
    """Only read for the personalized client story."""


class SocialMediaPostRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.CREATIVE_CONTENT.value] = TemplateType.CREATIVE_CONTENT.value
    creative_content_type: Literal[CreativeContentType.SOCIAL_MEDIA_POST.value] = (
        CreativeContentType.SOCIAL_MEDIA_POST.value
    )
    social_media_platform: SocialMediaPlatform = SocialMediaPlatform.INSTAGRAM
    dj_name: Optional[str] = None
    post_topic: Optional[str] = None


class BlogPostRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.CREATIVE_CONTENT.value] = TemplateType.CREATIVE_CONTENT.value
    creative_content_type: Literal[CreativeContentType.BLOG_POST.value] = CreativeContentType.BLOG_POST.value
    dj_name: Optional[str] = None
    post_topic: Optional[str] = None


class _MediaRequestBase(_GenerationRequestBase):
    prompt: str = ""

    @model_validator(mode="after")
    def _check_prompt(self):
        if not self.is_refinement and not self.prompt.strip():
            raise ValueError("Please describe the image or video to generate.")
        return self


class AiImageRequest(_MediaRequestBase):
    template_type: Literal[TemplateType.CREATIVE_CONTENT.value] = TemplateType.CREATIVE_CONTENT.value
    creative_content_type: Literal[CreativeContentType.AI_IMAGE.value] = CreativeContentType.AI_IMAGE.value
    aspect_ratio: ImageAspectRatio = ImageAspectRatio.SQUARE


class AiVideoRequest(_MediaRequestBase):
    template_type: Literal[TemplateType.CREATIVE_CONTENT.value] = TemplateType.CREATIVE_CONTENT.value
    creative_content_type: Literal[CreativeContentType.AI_VIDEO.value] = CreativeContentType.AI_VIDEO.value


class MusicPlaylistRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.MUSIC_PLAYLISTS.value] = TemplateType.MUSIC_PLAYLISTS.value
    playlist_type: PlaylistType = PlaylistType.OPEN_DANCING
    client_name: Optional[str] = None
    genre_vibe: Optional[str] = None
    must_play_songs: Optional[str] = None
    do_not_play_songs: Optional[str] = None


class SalesAssistantRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.SALES_ASSISTANT.value] = TemplateType.SALES_ASSISTANT.value
    sales_objection_type: SalesObjectionType = SalesObjectionType.PRICE_TOO_HIGH
    dj_name: Optional[str] = None
    client_name: Optional[str] = None
    total_cost: Optional[str] = None


class EventChecklistRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.EVENT_CHECKLIST.value] = TemplateType.EVENT_CHECKLIST.value


class PreEventQuestionnaireRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.PRE_EVENT_QUESTIONNAIRE.value] = (
        TemplateType.PRE_EVENT_QUESTIONNAIRE.value
    )


class PostEventQuestionnaireRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.POST_EVENT_QUESTIONNAIRE.value] = (
        TemplateType.POST_EVENT_QUESTIONNAIRE.value
    )


class EventTimelineRequest(_GenerationRequestBase):
    template_type: Literal[TemplateType.EVENT_TIMELINE.value] = TemplateType.EVENT_TIMELINE.value
    client_name: Optional[str] = None
    event_date: Optional[str] = None
    event_start_time: Optional[str] = None
    event_end_time: Optional[str] = None


CreativeContentRequest = Annotated[
    Union[
        McScriptRequest,
        SocialMediaPostRequest,
        BlogPostRequest,
        AiImageRequest,
        AiVideoRequest,
    ],
    Field(discriminator="creative_content_type"),
]

GenerationRequest = Annotated[
    Union[
        AgreementRequest,
        DepositTermsRequest,
        EmailFollowUpRequest,
        CreativeContentRequest,
        MusicPlaylistRequest,
        SalesAssistantRequest,
        EventChecklistRequest,
        PreEventQuestionnaireRequest,
        PostEventQuestionnaireRequest,
        EventTimelineRequest,
    ],
    Field(discriminator="template_type"),
]

generation_request_adapter = TypeAdapter(GenerationRequest)


def parse_generation_request(data: Dict[str, Any]) -> GenerationRequest:
    """Validate a camelCase payload into the matching request variant.

    Raises:
        pydantic.ValidationError: If the payload matches no variant
    """
    return generation_request_adapter.validate_python(data)


# ===== MEDIA TASK PARAMETERS =====


class ImageGenerationParams(CamelModel):
    """Parameters of the `generateImage` task."""

    prompt: str = Field(..., min_length=1)
    aspect_ratio: ImageAspectRatio = ImageAspectRatio.SQUARE

    class Config:
        json_schema_extra = {
            "example": {
                "prompt": "A DJ booth glowing under purple uplighting",
                "aspectRatio": "16:9",
            }
        }


class VideoGenerationParams(CamelModel):
    """Parameters of the `startVideoGeneration` task."""

    prompt: str = Field(..., min_length=1)


class VideoStatusParams(CamelModel):
    """Parameters of the `checkVideoStatus` task."""

    operation: Dict[str, Any]


class VideoFetchParams(CamelModel):
    """Parameters of the `fetchVideo` task."""

    download_link: str = Field(..., min_length=1)


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
]
