"""Server-side re-fetch of generated videos."""

import logging
from typing import Optional

import httpx
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask
from starlette.responses import Response

from app.config import settings

__all__ = ["proxy_video_download", "VIDEO_FETCH_FAILED"]

logger = logging.getLogger(__name__)

VIDEO_FETCH_FAILED = "Failed to fetch video from the provider."
DEFAULT_VIDEO_CONTENT_TYPE = "video/mp4"


async def proxy_video_download(
    download_link: str,
    api_key: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Response:
    """
    Stream a generated video back to the caller

    The provider link needs the credential, so it is appended here as the
    `key` query parameter instead of being handed to the client.

    Args:
        download_link: URI from the finished video operation
        api_key: Provider credential
        transport: Optional httpx transport (tests)

    Returns:
        StreamingResponse mirroring the provider's content headers, or a
        JSON `{error}` response carrying the provider's status code
    """
    client = httpx.AsyncClient(
        timeout=settings.VIDEO_DOWNLOAD_TIMEOUT_SECONDS,
        follow_redirects=True,
        transport=transport,
    )
    try:
        request = client.build_request("GET", download_link, params={"key": api_key})
        upstream = await client.send(request, stream=True)
    except Exception:
        await client.aclose()
        raise

    if upstream.is_error:
        logger.error(
            "[downloads] Provider rejected video download",
            extra={"status_code": upstream.status_code},
        )
        await upstream.aclose()
        await client.aclose()
        return JSONResponse(
            status_code=upstream.status_code,
            content={"error": VIDEO_FETCH_FAILED},
        )

    headers = {}
    content_length = upstream.headers.get("content-length")
    if content_length:
        headers["Content-Length"] = content_length
    content_encoding = upstream.headers.get("content-encoding")
    if content_encoding:
        headers["Content-Encoding"] = content_encoding

    async def close() -> None:
        await upstream.aclose()
        await client.aclose()

    logger.info("[downloads] Streaming video", extra={"content_length": content_length})
    return StreamingResponse(
        upstream.aiter_raw(),
        media_type=upstream.headers.get("content-type", DEFAULT_VIDEO_CONTENT_TYPE),
        headers=headers,
        background=BackgroundTask(close),
    )
