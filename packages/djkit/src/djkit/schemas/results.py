"""Result payloads produced by the proxy and consumed by the client."""

from typing import List, Optional

from pydantic import Field

from .requests import CamelModel
from ..models import ImageAspectRatio


class WebSource(CamelModel):
    """A web page the model cited."""

    uri: str
    title: Optional[str] = None


class GroundingChunk(CamelModel):
    """Citation attached to streamed text produced with web search."""

    web: WebSource


class StreamChunk(CamelModel):
    """One increment of a streamed text generation."""

    text: str = ""
    grounding_chunks: Optional[List[GroundingChunk]] = None

    def to_event(self) -> str:
        """Frame the chunk as a server-sent event."""
        payload = self.model_dump_json(by_alias=True, exclude_none=True)
        return f"data: {payload}\n\n"

    class Config:
        json_schema_extra = {
            "example": {
                "text": "### Open Dancing Suggestions for Alice\n",
                "groundingChunks": [
                    {"web": {"uri": "https://example.com/guide", "title": "Wedding music guide"}}
                ],
            }
        }


class ImageResult(CamelModel):
    """A single generated image."""

    image_bytes: str
    """Base64-encoded JPEG payload."""

    aspect_ratio: Optional[ImageAspectRatio] = None
    mime_type: str = Field(default="image/jpeg")


__all__ = ["WebSource", "GroundingChunk", "StreamChunk", "ImageResult"]
