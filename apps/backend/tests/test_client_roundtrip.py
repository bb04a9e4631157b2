"""End-to-end tests: ProxyClient talking to the FastAPI app in-process"""

import functools

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from app.main import app
from app.services.downloads import proxy_video_download
from app.services.gemini import get_gemini_service
from djkit import ProviderError, ProxyClient, SafetyRejectionError, TemplateBuffer, VideoPlayback
from djkit.schemas import ImageGenerationParams, parse_generation_request

PROXY_URL = "http://testserver/api/geminiProxy"


@pytest.fixture
def proxy_client(fake_service):
    app.dependency_overrides[get_gemini_service] = lambda: fake_service
    yield ProxyClient(proxy_url=PROXY_URL, transport=httpx.ASGITransport(app=app))
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_stream_into_buffer(proxy_client):
    request = parse_generation_request({"templateType": "Event Checklist"})
    buffer = TemplateBuffer()
    buffer.start()

    async with proxy_client as client:
        async for chunk in client.stream_template(request):
            buffer.apply(chunk)

    assert buffer.text == "Hello world"


@pytest.mark.asyncio
async def test_mid_stream_failure_reaches_client(proxy_client, fake_service, stream_of):
    fake_service.stream_text = stream_of("partial", RuntimeError("Provider went away"))
    request = parse_generation_request({"templateType": "Event Checklist"})
    received = []

    async with proxy_client as client:
        with pytest.raises(ProviderError, match="Provider went away"):
            async for chunk in client.stream_template(request):
                received.append(chunk.text)

    assert received == ["partial"]


@pytest.mark.asyncio
async def test_image_rejection_reaches_client(proxy_client, fake_service):
    fake_service.generate_image = AsyncMock(side_effect=SafetyRejectionError("Image generation failed. Your prompt may have violated the safety policy."))

    async with proxy_client as client:
        with pytest.raises(ProviderError, match="safety policy"):
            await client.generate_image(ImageGenerationParams(prompt="x"))


@pytest.mark.asyncio
async def test_image_round_trip(proxy_client):
    async with proxy_client as client:
        result = await client.generate_image(ImageGenerationParams(prompt="Neon booth"))

    assert result.image_bytes == "aGVsbG8="


@pytest.mark.asyncio
async def test_video_generation_and_playback(proxy_client, fake_service, tmp_path):
    """Test start, poll, fetch and local playback of a generated video."""
    link = "https://files.example/v.mp4"
    fake_service.check_video = AsyncMock(side_effect=[
        {"name": "operations/1", "done": False},
        {"name": "operations/1", "done": True, "response": {"generatedVideos": [{"video": {"uri": link}}]}},
    ])

    def provider(request: httpx.Request) -> httpx.Response:
        assert request.url.params["key"] == "test-gemini-key"
        return httpx.Response(200, headers={"content-type": "video/mp4"}, content=b"mp4-bytes")

    download = functools.partial(proxy_video_download, transport=httpx.MockTransport(provider))
    statuses = []

    with patch("app.api.proxy.proxy_video_download", new=download):
        async with proxy_client as client:
            uri = await client.generate_video("Confetti", on_status=statuses.append, interval=0)
            data = await client.fetch_video(uri)

    assert uri == link
    assert fake_service.check_video.await_count == 2
    assert statuses[-1] == "Video generation complete!"

    with VideoPlayback(directory=str(tmp_path)) as playback:
        path = playback.load(data)
        assert open(path, "rb").read() == b"mp4-bytes"
