"""Server-sent event parsing for streamed text generation."""

import json
import logging
from typing import AsyncIterable, AsyncIterator, Optional

from pydantic import ValidationError

from ..schemas import StreamChunk
from ..utils.errors import ProviderError, StreamParseError

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
FRAME_SEPARATOR = "\n\n"


def parse_frame(frame: str) -> Optional[StreamChunk]:
    """Decode a single SSE frame into a StreamChunk.

    Args:
        frame: Raw frame text without the trailing blank line

    Returns:
        The decoded chunk, or None for frames carrying no data line

    Raises:
        ProviderError: If the frame reports a provider error
        ValueError: If the data line is not a valid chunk payload
    """
    data_lines = [
        line[len(DATA_PREFIX):]
        for line in frame.splitlines()
        if line.startswith(DATA_PREFIX)
    ]
    if not data_lines:
        return None

    payload = json.loads("\n".join(data_lines))
    if isinstance(payload, dict) and payload.get("error"):
        raise ProviderError(str(payload["error"]))

    try:
        return StreamChunk.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Unexpected chunk payload: {e}") from e


async def parse_event_stream(
    text_chunks: AsyncIterable[str],
    max_consecutive_errors: int = 5,
) -> AsyncIterator[StreamChunk]:
    """Reassemble SSE frames from arbitrarily split text and yield chunks.

    Malformed frames are logged and skipped. A run of more than
    `max_consecutive_errors` malformed frames aborts the stream.

    Raises:
        ProviderError: When the server sends an error frame
        StreamParseError: When too many frames in a row fail to parse
    """
    buffer = ""
    consecutive_errors = 0

    def frames(final: bool = False):
        nonlocal buffer
        if final:
            rest, buffer = buffer, ""
            if rest.strip():
                yield rest
            return
        while FRAME_SEPARATOR in buffer:
            frame, buffer = buffer.split(FRAME_SEPARATOR, 1)
            yield frame

    def decode(frame: str) -> Optional[StreamChunk]:
        nonlocal consecutive_errors
        try:
            chunk = parse_frame(frame)
        except ProviderError:
            raise
        except ValueError as e:
            consecutive_errors += 1
            logger.warning(
                f"[sse] Skipping malformed frame: {e}",
                extra={"consecutive_errors": consecutive_errors},
            )
            if consecutive_errors > max_consecutive_errors:
                raise StreamParseError(
                    f"Stream aborted after {consecutive_errors} consecutive malformed frames"
                ) from e
            return None
        consecutive_errors = 0
        return chunk

    async for text in text_chunks:
        buffer += text.replace("\r\n", "\n")
        for frame in frames():
            chunk = decode(frame)
            if chunk is not None:
                yield chunk

    for frame in frames(final=True):
        chunk = decode(frame)
        if chunk is not None:
            yield chunk


__all__ = ["parse_frame", "parse_event_stream"]
