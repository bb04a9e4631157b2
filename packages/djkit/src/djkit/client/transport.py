"""HTTP client for the generation proxy."""

import logging
from typing import Any, AsyncIterator, Callable, Dict, Optional

import httpx

from ..config import settings
from ..schemas import (
    GenerationRequest,
    ImageGenerationParams,
    ImageResult,
    StreamChunk,
    VideoFetchParams,
    VideoGenerationParams,
    VideoStatusParams,
)
from ..utils.errors import ProviderError, TransportError, VideoFetchError
from .polling import poll_video_generation
from .sse import parse_event_stream

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response, fallback: str) -> str:
    """Return the proxy's `{error}` message, or the fallback when absent."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


class ProxyClient:
    """
    Async client for `POST {PROXY_URL}` task calls

    Use as an async context manager so the underlying connection pool is
    closed:

        async with ProxyClient() as client:
            async for chunk in client.stream_template(request):
                ...
    """

    def __init__(
        self,
        proxy_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_consecutive_parse_errors: Optional[int] = None,
    ):
        self.proxy_url = proxy_url or settings.PROXY_URL
        self.max_consecutive_parse_errors = (
            max_consecutive_parse_errors
            if max_consecutive_parse_errors is not None
            else settings.STREAM_MAX_CONSECUTIVE_PARSE_ERRORS
        )
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def __aenter__(self) -> "ProxyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, task: str, params: Dict[str, Any]) -> httpx.Response:
        try:
            return await self._client.post(
                self.proxy_url, json={"task": task, "params": params}
            )
        except httpx.HTTPError as e:
            logger.error(f"[client] {task} request failed: {e}")
            raise TransportError(f"Could not reach the proxy: {e}") from e

    async def stream_template(self, request: GenerationRequest) -> AsyncIterator[StreamChunk]:
        """
        Stream generated text for a template request

        Yields:
            StreamChunk objects in the order the provider produced them

        Raises:
            ProviderError: If the proxy rejects the request or sends an error frame
            StreamParseError: If the stream keeps producing malformed frames
            TransportError: If the connection fails
        """
        body = {
            "task": "generateStream",
            "params": request.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
        try:
            async with self._client.stream("POST", self.proxy_url, json=body) as response:
                if response.is_error:
                    await response.aread()
                    raise ProviderError(
                        _error_message(response, f"Request failed with status {response.status_code}")
                    )

                async for chunk in parse_event_stream(
                    response.aiter_text(), self.max_consecutive_parse_errors
                ):
                    yield chunk
        except httpx.HTTPError as e:
            logger.error(f"[client] Text stream failed: {e}")
            raise TransportError(f"Text stream failed: {e}") from e

    async def generate_image(self, params: ImageGenerationParams) -> ImageResult:
        """Generate one image and return it with the requested aspect ratio."""
        response = await self._post(
            "generateImage", params.model_dump(mode="json", by_alias=True)
        )
        if response.is_error:
            raise ProviderError(_error_message(response, "Failed to generate image."))

        try:
            image_bytes = response.json().get("imageBytes")
        except ValueError:
            image_bytes = None
        if not image_bytes:
            raise ProviderError("API did not return an image.")

        return ImageResult(image_bytes=image_bytes, aspect_ratio=params.aspect_ratio)

    async def _operation_task(self, task: str, params: Dict[str, Any], fallback: str) -> Dict[str, Any]:
        response = await self._post(task, params)
        if response.is_error:
            raise ProviderError(_error_message(response, fallback))
        try:
            operation = response.json().get("operation")
        except ValueError:
            operation = None
        if not isinstance(operation, dict):
            raise ProviderError(fallback)
        return operation

    async def start_video(self, prompt: str) -> Dict[str, Any]:
        """Start a video generation job and return its operation handle."""
        params = VideoGenerationParams(prompt=prompt)
        return await self._operation_task(
            "startVideoGeneration",
            params.model_dump(mode="json", by_alias=True),
            "Failed to start video generation.",
        )

    async def check_video(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        """Refresh an operation handle."""
        params = VideoStatusParams(operation=operation)
        return await self._operation_task(
            "checkVideoStatus",
            params.model_dump(mode="json", by_alias=True),
            "Failed to check video status.",
        )

    async def generate_video(
        self,
        prompt: str,
        on_status: Optional[Callable[[str], None]] = None,
        **poll_options,
    ) -> str:
        """Run a video job to completion and return its download link.

        Extra keyword arguments (`interval`, `max_polls`, `timeout`) are
        passed to the polling loop.
        """
        return await poll_video_generation(self, prompt, on_status=on_status, **poll_options)

    async def fetch_video(self, download_link: str) -> bytes:
        """
        Download a finished video through the proxy

        Raises:
            VideoFetchError: If the download fails for any reason
        """
        params = VideoFetchParams(download_link=download_link)
        try:
            response = await self._post(
                "fetchVideo", params.model_dump(mode="json", by_alias=True)
            )
        except TransportError as e:
            raise VideoFetchError(f"Failed to download the generated video: {e}") from e

        if response.is_error:
            raise VideoFetchError(
                _error_message(response, "Failed to download the generated video.")
            )

        logger.info(
            "[client] Video downloaded",
            extra={"size_bytes": len(response.content)},
        )
        return response.content


__all__ = ["ProxyClient"]
