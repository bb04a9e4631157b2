"""Tests for the video polling loop."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from djkit.client.polling import (
    STATUS_CHECKING,
    STATUS_COMPLETE,
    STATUS_PROCESSING,
    STATUS_STARTING,
    extract_block_reason,
    poll_video_generation,
)
from djkit.utils.errors import ProviderError, SafetyRejectionError, VideoTimeoutError

VIDEO_URI = "https://generativelanguage.example/files/abc:download"


def _done(response=None, **extra):
    operation = {"name": "operations/1", "done": True, **extra}
    if response is not None:
        operation["response"] = response
    return operation


def _with_video():
    return _done({"generatedVideos": [{"video": {"uri": VIDEO_URI}}]})


def _fake_client(start, *checks):
    client = MagicMock()
    client.start_video = AsyncMock(return_value=start)
    client.check_video = AsyncMock(side_effect=list(checks))
    return client


@pytest.mark.asyncio
async def test_polls_until_done_and_reports_status():
    """Test that the loop checks exactly until the job finishes."""
    pending = {"name": "operations/1", "done": False}
    client = _fake_client(pending, pending, _with_video())
    statuses = []

    uri = await poll_video_generation(client, "Confetti", on_status=statuses.append, interval=0)

    assert uri == VIDEO_URI
    client.start_video.assert_awaited_once_with("Confetti")
    assert client.check_video.await_count == 2
    assert statuses == [
        STATUS_STARTING,
        STATUS_PROCESSING,
        STATUS_CHECKING,
        STATUS_CHECKING,
        STATUS_COMPLETE,
    ]


@pytest.mark.asyncio
async def test_already_done_operation_needs_no_checks():
    client = _fake_client(_with_video())

    uri = await poll_video_generation(client, "x", interval=0)

    assert uri == VIDEO_URI
    client.check_video.assert_not_awaited()


@pytest.mark.asyncio
async def test_blocked_prompt_raises_safety_rejection():
    client = _fake_client(_done({"promptFeedback": {"blockReason": "SAFETY"}}))

    with pytest.raises(SafetyRejectionError, match="blocked for: SAFETY"):
        await poll_video_generation(client, "x", interval=0)


@pytest.mark.asyncio
async def test_filtered_media_raises_safety_rejection():
    client = _fake_client(_done({"raiMediaFilteredReasons": ["Celebrity likeness"]}))

    with pytest.raises(SafetyRejectionError, match="Celebrity likeness"):
        await poll_video_generation(client, "x", interval=0)


@pytest.mark.asyncio
async def test_done_without_video_raises_provider_error():
    client = _fake_client(_done({"generatedVideos": []}))

    with pytest.raises(ProviderError, match="No video was generated by the API."):
        await poll_video_generation(client, "x", interval=0)


@pytest.mark.asyncio
async def test_operation_error_raises_provider_error():
    client = _fake_client(_done(error={"code": 3, "message": "Invalid prompt"}))

    with pytest.raises(ProviderError, match="Invalid prompt"):
        await poll_video_generation(client, "x", interval=0)


@pytest.mark.asyncio
async def test_max_polls_expires_with_timeout_error():
    pending = {"name": "operations/1", "done": False}
    client = _fake_client(pending, pending, pending, pending)

    with pytest.raises(VideoTimeoutError):
        await poll_video_generation(client, "x", interval=0, max_polls=3)

    assert client.check_video.await_count == 3


@pytest.mark.asyncio
async def test_total_duration_expires_with_timeout_error():
    pending = {"name": "operations/1", "done": False}
    client = _fake_client(pending)

    with pytest.raises(VideoTimeoutError):
        await poll_video_generation(client, "x", interval=5, timeout=1)

    client.check_video.assert_not_awaited()


@pytest.mark.asyncio
async def test_cancellation_stops_the_loop():
    """Test that cancelling the awaiting task stops polling immediately."""
    pending = {"name": "operations/1", "done": False}
    client = MagicMock()
    client.start_video = AsyncMock(return_value=pending)
    client.check_video = AsyncMock(return_value=pending)

    task = asyncio.create_task(poll_video_generation(client, "x", interval=60))
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    client.check_video.assert_not_awaited()


def test_extract_block_reason_prefers_prompt_feedback():
    operation = _done({
        "promptFeedback": {"blockReason": "OTHER"},
        "raiMediaFilteredReasons": ["ignored"],
    })
    assert extract_block_reason(operation) == "OTHER"
    assert extract_block_reason(_done({})) is None
