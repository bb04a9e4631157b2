"""Non-visual output handling: chunk accumulation, form hints, media files."""

import logging
import os
import random
import re
import tempfile
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .models import CreativeContentType, FORM_TEMPLATE_TYPES, TemplateType
from .schemas import GroundingChunk, StreamChunk

logger = logging.getLogger(__name__)

FORM_QUESTION_TYPES = (
    "Short Answer",
    "Paragraph",
    "Multiple Choice",
    "Checkboxes",
    "Linear Scale 1-5",
)

_FORM_ANNOTATION = re.compile(
    r"\[(" + "|".join(re.escape(t) for t in FORM_QUESTION_TYPES) + r")\]"
)

TEXT_LOADING_MESSAGES = [
    "Cueing up the AI...",
    "Mixing the perfect prompts...",
    "Scratching the vinyl of creativity...",
    "Finding the right tempo for your text...",
    "Dropping the bass on this template...",
    "Syncing with the creative cloud...",
    "Warming up the generative decks...",
    "Crafting a killer set... of words.",
]

IMAGE_LOADING_MESSAGES = [
    "Rendering pixels...",
    "Focusing the creative lens...",
    "Developing the digital image...",
    "Mixing a palette of colors...",
    "Composing the perfect shot...",
    "Waiting for the AI muse...",
]

VIDEO_LOADING_MESSAGES = [
    "Directing the digital scene...",
    "Rendering the final cut...",
    "This can take a few minutes, great visuals are on the way!",
    "Action! The AI is rolling...",
    "Assembling frames into motion...",
    "Waiting for the video to process...",
]


@dataclass
class TemplateBuffer:
    """
    Accumulates streamed chunks into the displayed document

    For a refinement the first chunk replaces the previous text and later
    chunks append; otherwise every chunk appends. The most recent non-empty
    list of grounding chunks is kept.
    """

    text: str = ""
    grounding_chunks: List[GroundingChunk] = field(default_factory=list)
    is_refinement: bool = False
    _started: bool = False

    def start(self, is_refinement: bool = False) -> None:
        """Prepare for a new generation."""
        self.is_refinement = is_refinement
        self._started = False
        if not is_refinement:
            self.text = ""
        self.grounding_chunks = []

    def apply(self, chunk: StreamChunk) -> str:
        if self.is_refinement and not self._started:
            self.text = chunk.text
        else:
            self.text += chunk.text
        self._started = True

        if chunk.grounding_chunks:
            self.grounding_chunks = list(chunk.grounding_chunks)
        return self.text


def is_form_template(template_type) -> bool:
    value = getattr(template_type, "value", template_type)
    return value in {t.value for t in FORM_TEMPLATE_TYPES}


def is_image_task(template_type, creative_content_type=None) -> bool:
    return (
        template_type == TemplateType.CREATIVE_CONTENT
        and creative_content_type == CreativeContentType.AI_IMAGE
    )


def is_video_task(template_type, creative_content_type=None) -> bool:
    return (
        template_type == TemplateType.CREATIVE_CONTENT
        and creative_content_type == CreativeContentType.AI_VIDEO
    )


def extract_form_items(text: str) -> List[dict]:
    """Return the lines carrying a suggested question type.

    Each item has the line text without its annotation and the annotated
    question type, e.g. `{"question": "Couple's names", "type": "Short Answer"}`.
    """
    items = []
    for line in text.splitlines():
        match = _FORM_ANNOTATION.search(line)
        if not match:
            continue
        question = _FORM_ANNOTATION.sub("", line).strip(" -*:\t")
        items.append({"question": question, "type": match.group(1)})
    return items


def loading_messages_for(template_type, creative_content_type=None) -> List[str]:
    if is_video_task(template_type, creative_content_type):
        return VIDEO_LOADING_MESSAGES
    if is_image_task(template_type, creative_content_type):
        return IMAGE_LOADING_MESSAGES
    return TEXT_LOADING_MESSAGES


def next_loading_message(
    messages: List[str],
    previous: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Pick a loading message different from the previous one when possible."""
    rng = rng or random.Random()
    choices = [m for m in messages if m != previous] or messages
    return rng.choice(choices)


def image_data_url(image_bytes: str, mime_type: str = "image/jpeg") -> str:
    return f"data:{mime_type};base64,{image_bytes}"


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def image_download_name(timestamp: Optional[int] = None) -> str:
    return f"dj-success-kit-ai-image-{timestamp or _timestamp_ms()}.jpeg"


def video_download_name(timestamp: Optional[int] = None) -> str:
    return f"dj-success-kit-ai-video-{timestamp or _timestamp_ms()}.mp4"


class VideoPlayback:
    """
    Local file holding a fetched video for playback

    Loading a new video releases the previous file. Use as a context manager
    or call release() when playback is no longer needed.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory
        self.path: Optional[str] = None

    def load(self, video_bytes: bytes) -> str:
        self.release()
        fd, path = tempfile.mkstemp(dir=self.directory, prefix="djkit-video-", suffix=".mp4")
        with os.fdopen(fd, "wb") as f:
            f.write(video_bytes)
        self.path = path
        logger.debug("[playback] Video written", extra={"size_bytes": len(video_bytes)})
        return path

    def release(self) -> None:
        if self.path is None:
            return
        try:
            os.unlink(self.path)
        except FileNotFoundError:
            pass
        self.path = None

    def __enter__(self) -> "VideoPlayback":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


__all__ = [
    "TemplateBuffer",
    "FORM_QUESTION_TYPES",
    "is_form_template",
    "is_image_task",
    "is_video_task",
    "extract_form_items",
    "loading_messages_for",
    "next_loading_message",
    "image_data_url",
    "image_download_name",
    "video_download_name",
    "VideoPlayback",
    "TEXT_LOADING_MESSAGES",
    "IMAGE_LOADING_MESSAGES",
    "VIDEO_LOADING_MESSAGES",
]
