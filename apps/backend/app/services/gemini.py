"""
Gemini provider service

Wraps the google-genai SDK for the three generation families the proxy
serves:
- streamed text (optionally grounded with Google Search)
- single image generation
- long-running video generation and status refresh
"""

import base64
import logging
from functools import lru_cache
from typing import Any, AsyncIterator, Dict, Optional

from google import genai
from google.genai import types

from djkit import ConfigurationError, SafetyRejectionError, ProviderError
from djkit.prompts import build_media_prompt, build_prompt, uses_web_search
from djkit.schemas import (
    GenerationRequest,
    GroundingChunk,
    ImageGenerationParams,
    StreamChunk,
    VideoGenerationParams,
    WebSource,
)
from app.config import settings

__all__ = ["GeminiService", "get_gemini_service"]

logger = logging.getLogger(__name__)

IMAGE_SAFETY_MESSAGE = (
    "Image generation failed. Your prompt may have violated the safety policy. "
    "Please try a different prompt."
)


def _dump_operation(operation) -> Dict[str, Any]:
    return operation.model_dump(mode="json", by_alias=True, exclude_none=True)


class GeminiService:
    """Provider calls made on behalf of proxy clients"""

    def __init__(self, api_key: str, client: Optional[genai.Client] = None):
        self.api_key = api_key
        self.client = client or genai.Client(api_key=api_key)

    @staticmethod
    def to_stream_chunk(response) -> StreamChunk:
        """
        Convert one SDK streaming response into a StreamChunk

        Args:
            response: GenerateContentResponse from the streaming call

        Returns:
            StreamChunk with the text increment and any web citations
        """
        grounding = None
        candidates = getattr(response, "candidates", None) or []
        metadata = candidates[0].grounding_metadata if candidates else None
        if metadata is not None and metadata.grounding_chunks:
            grounding = [
                GroundingChunk(web=WebSource(uri=gc.web.uri, title=gc.web.title))
                for gc in metadata.grounding_chunks
                if gc.web is not None and gc.web.uri
            ] or None

        return StreamChunk(text=response.text or "", grounding_chunks=grounding)

    async def stream_text(self, request: GenerationRequest) -> AsyncIterator[StreamChunk]:
        """
        Stream generated text for a template request

        The provider is only called once iteration starts.

        Yields:
            StreamChunk objects in provider order
        """
        prompt = build_prompt(request)
        tools = None
        if uses_web_search(request):
            tools = [types.Tool(google_search=types.GoogleSearch())]

        config = types.GenerateContentConfig(
            temperature=settings.TEMPERATURE,
            top_p=settings.TOP_P,
            tools=tools,
        )

        logger.info(
            "[gemini] Starting text stream",
            extra={"model": settings.TEXT_MODEL, "web_search": tools is not None},
        )
        stream = await self.client.aio.models.generate_content_stream(
            model=settings.TEXT_MODEL,
            contents=prompt,
            config=config,
        )
        async for response in stream:
            yield self.to_stream_chunk(response)

    async def generate_image(self, params: ImageGenerationParams) -> str:
        """
        Generate one JPEG image

        Returns:
            Base64-encoded image bytes

        Raises:
            SafetyRejectionError: If the provider returned no images
            ProviderError: If the provider returned no result at all
        """
        logger.info(
            "[gemini] Generating image",
            extra={"model": settings.IMAGE_MODEL, "aspect_ratio": params.aspect_ratio.value},
        )
        response = await self.client.aio.models.generate_images(
            model=settings.IMAGE_MODEL,
            prompt=build_media_prompt(params),
            config=types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type="image/jpeg",
                aspect_ratio=params.aspect_ratio.value,
            ),
        )

        images = response.generated_images if response is not None else None
        if images is None:
            raise ProviderError("No image was generated by the API.")
        if not images:
            raise SafetyRejectionError(IMAGE_SAFETY_MESSAGE)

        image = images[0].image
        if image is None or not image.image_bytes:
            raise ProviderError("No image was generated by the API.")

        return base64.b64encode(image.image_bytes).decode("ascii")

    async def start_video(self, params: VideoGenerationParams) -> Dict[str, Any]:
        """Start a video generation and return the serialized operation."""
        logger.info("[gemini] Starting video generation", extra={"model": settings.VIDEO_MODEL})
        operation = await self.client.aio.models.generate_videos(
            model=settings.VIDEO_MODEL,
            prompt=build_media_prompt(params),
            config=types.GenerateVideosConfig(number_of_videos=1),
        )
        return _dump_operation(operation)

    async def check_video(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        """Refresh a serialized operation handle."""
        handle = types.GenerateVideosOperation.model_validate(operation)
        refreshed = await self.client.aio.operations.get(handle)
        logger.debug(
            "[gemini] Video status refreshed",
            extra={"operation": refreshed.name, "done": bool(refreshed.done)},
        )
        return _dump_operation(refreshed)


@lru_cache(maxsize=4)
def _service_for_key(api_key: str) -> GeminiService:
    return GeminiService(api_key=api_key)


def get_gemini_service() -> GeminiService:
    """
    FastAPI dependency returning the provider service

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not configured
    """
    if not settings.GEMINI_API_KEY:
        logger.error("[gemini] GEMINI_API_KEY is not configured")
        raise ConfigurationError(
            "GEMINI_API_KEY not configured. Please set it in your .env file."
        )
    return _service_for_key(settings.GEMINI_API_KEY)
