"""Tests for output handling helpers."""

import os
import random

from djkit.models import CreativeContentType, TemplateType
from djkit.output import (
    IMAGE_LOADING_MESSAGES,
    TEXT_LOADING_MESSAGES,
    VIDEO_LOADING_MESSAGES,
    TemplateBuffer,
    VideoPlayback,
    extract_form_items,
    image_data_url,
    image_download_name,
    is_form_template,
    loading_messages_for,
    next_loading_message,
    video_download_name,
)
from djkit.schemas import GroundingChunk, StreamChunk, WebSource


def _grounding(uri):
    return [GroundingChunk(web=WebSource(uri=uri))]


def test_buffer_appends_chunks():
    buffer = TemplateBuffer()
    buffer.start()
    buffer.apply(StreamChunk(text="Hello "))
    buffer.apply(StreamChunk(text="world"))

    assert buffer.text == "Hello world"


def test_refinement_first_chunk_replaces_then_appends():
    """Test that a refinement overwrites the old text only once."""
    buffer = TemplateBuffer(text="Original long text")
    buffer.start(is_refinement=True)

    assert buffer.text == "Original long text"
    buffer.apply(StreamChunk(text="Short"))
    assert buffer.text == "Short"
    buffer.apply(StreamChunk(text="er."))
    assert buffer.text == "Shorter."


def test_new_generation_clears_text():
    buffer = TemplateBuffer(text="Old")
    buffer.start()
    assert buffer.text == ""


def test_latest_non_empty_grounding_wins():
    buffer = TemplateBuffer()
    buffer.start()
    buffer.apply(StreamChunk(text="a", grounding_chunks=_grounding("https://one.example")))
    buffer.apply(StreamChunk(text="b"))
    assert buffer.grounding_chunks[0].web.uri == "https://one.example"

    buffer.apply(StreamChunk(text="c", grounding_chunks=_grounding("https://two.example")))
    assert [g.web.uri for g in buffer.grounding_chunks] == ["https://two.example"]


def test_is_form_template():
    assert is_form_template(TemplateType.EVENT_CHECKLIST)
    assert is_form_template("Pre-Event Questionnaire")
    assert is_form_template(TemplateType.POST_EVENT_QUESTIONNAIRE)
    assert not is_form_template(TemplateType.AGREEMENT)
    assert not is_form_template("Event Timeline Builder")


def test_extract_form_items():
    text = "\n".join([
        "### Couple's Info",
        "- Couple's full names [Short Answer]",
        "* How did you meet? [Paragraph]",
        "Rate our planning process [Linear Scale 1-5]",
        "Plain line without a hint",
    ])

    items = extract_form_items(text)

    assert items == [
        {"question": "Couple's full names", "type": "Short Answer"},
        {"question": "How did you meet?", "type": "Paragraph"},
        {"question": "Rate our planning process", "type": "Linear Scale 1-5"},
    ]


def test_loading_messages_follow_task_kind():
    assert loading_messages_for(TemplateType.AGREEMENT) is TEXT_LOADING_MESSAGES
    assert loading_messages_for(TemplateType.CREATIVE_CONTENT, CreativeContentType.AI_IMAGE) is IMAGE_LOADING_MESSAGES
    assert loading_messages_for(TemplateType.CREATIVE_CONTENT, CreativeContentType.AI_VIDEO) is VIDEO_LOADING_MESSAGES


def test_next_loading_message_avoids_repeat():
    rng = random.Random(1)
    previous = TEXT_LOADING_MESSAGES[0]
    for _ in range(20):
        message = next_loading_message(TEXT_LOADING_MESSAGES, previous, rng)
        assert message != previous
        previous = message

    assert next_loading_message(["only"], "only") == "only"


def test_image_helpers():
    assert image_data_url("aGk=") == "data:image/jpeg;base64,aGk="
    assert image_download_name(1700000000000) == "dj-success-kit-ai-image-1700000000000.jpeg"
    assert video_download_name(1700000000000) == "dj-success-kit-ai-video-1700000000000.mp4"
    assert image_download_name().startswith("dj-success-kit-ai-image-")


def test_video_playback_release_removes_file(tmp_path):
    playback = VideoPlayback(directory=str(tmp_path))
    path = playback.load(b"video-bytes")

    assert open(path, "rb").read() == b"video-bytes"
    playback.release()
    assert not os.path.exists(path)
    assert playback.path is None
    playback.release()


def test_video_playback_superseded_file_is_released(tmp_path):
    with VideoPlayback(directory=str(tmp_path)) as playback:
        first = playback.load(b"one")
        second = playback.load(b"two")
        assert not os.path.exists(first)
        assert os.path.exists(second)

    assert not os.path.exists(second)
