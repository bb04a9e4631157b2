"""Video generation polling loop."""

import asyncio
import enum
import logging
from typing import Any, Callable, Dict, Optional

from ..config import settings
from ..utils.errors import ProviderError, SafetyRejectionError, VideoTimeoutError

logger = logging.getLogger(__name__)

STATUS_STARTING = "Starting video generation..."
STATUS_PROCESSING = "Processing video... this can take a few minutes."
STATUS_CHECKING = "Checking video status..."
STATUS_COMPLETE = "Video generation complete!"


class VideoJobState(str, enum.Enum):
    STARTING = "starting"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


def extract_video_uri(operation: Dict[str, Any]) -> Optional[str]:
    """Return the first generated video's URI from a finished operation."""
    response = operation.get("response") or {}
    videos = response.get("generatedVideos") or []
    if not videos:
        return None
    return (videos[0].get("video") or {}).get("uri")


def extract_block_reason(operation: Dict[str, Any]) -> Optional[str]:
    """Return why the provider filtered the video, if it said so."""
    response = operation.get("response") or {}
    feedback = response.get("promptFeedback") or {}
    if feedback.get("blockReason"):
        return str(feedback["blockReason"])
    filtered = response.get("raiMediaFilteredReasons") or []
    if filtered:
        return ", ".join(str(reason) for reason in filtered)
    return None


def _finish(operation: Dict[str, Any]) -> str:
    error = operation.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise ProviderError(message or "Video generation failed.")

    uri = extract_video_uri(operation)
    if uri:
        return uri

    reason = extract_block_reason(operation)
    if reason:
        raise SafetyRejectionError(
            f"Video generation failed. Your prompt was blocked for: {reason}. "
            "Please try a different prompt."
        )
    raise ProviderError("No video was generated by the API.")


async def poll_video_generation(
    client,
    prompt: str,
    on_status: Optional[Callable[[str], None]] = None,
    interval: Optional[float] = None,
    max_polls: Optional[int] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Start a video job and poll it until it finishes

    Args:
        client: Object exposing `start_video(prompt)` and `check_video(operation)`
        prompt: Video description
        on_status: Called with a human-readable message at each transition
        interval: Seconds between status checks
        max_polls: Maximum number of status checks
        timeout: Maximum total seconds spent waiting

    Returns:
        Download link of the generated video

    Raises:
        SafetyRejectionError: If the provider filtered the video
        ProviderError: If the job finished without a video
        VideoTimeoutError: If the job is still running when the budget expires
        asyncio.CancelledError: If the awaiting task is cancelled
    """
    interval = settings.VIDEO_POLL_INTERVAL_SECONDS if interval is None else interval
    max_polls = settings.VIDEO_MAX_POLLS if max_polls is None else max_polls
    timeout = settings.VIDEO_TIMEOUT_SECONDS if timeout is None else timeout

    def notify(message: str) -> None:
        if on_status is not None:
            on_status(message)

    state = VideoJobState.STARTING
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    polls = 0

    try:
        notify(STATUS_STARTING)
        operation = await client.start_video(prompt)
        state = VideoJobState.PENDING
        notify(STATUS_PROCESSING)

        while not operation.get("done"):
            if polls >= max_polls or loop.time() + interval > deadline:
                state = VideoJobState.TIMED_OUT
                raise VideoTimeoutError(
                    f"Video generation did not finish after {polls} status checks."
                )

            await asyncio.sleep(interval)
            notify(STATUS_CHECKING)
            operation = await client.check_video(operation)
            polls += 1
            logger.debug(
                "[polling] Video status checked",
                extra={"polls": polls, "done": bool(operation.get("done"))},
            )

        uri = _finish(operation)
        state = VideoJobState.SUCCEEDED
        notify(STATUS_COMPLETE)
        logger.info("[polling] Video generation complete", extra={"polls": polls, "state": state.value})
        return uri

    except asyncio.CancelledError:
        logger.info("[polling] Video generation cancelled", extra={"polls": polls})
        raise
    except VideoTimeoutError:
        logger.warning("[polling] Video generation timed out", extra={"polls": polls, "state": state.value})
        raise
    except Exception as e:
        state = VideoJobState.FAILED
        logger.error(f"[polling] Video generation failed: {e}", extra={"state": state.value})
        raise


__all__ = [
    "VideoJobState",
    "poll_video_generation",
    "extract_video_uri",
    "extract_block_reason",
    "STATUS_STARTING",
    "STATUS_PROCESSING",
    "STATUS_CHECKING",
    "STATUS_COMPLETE",
]
