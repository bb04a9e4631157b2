"""Pytest configuration and fixtures"""

import os
import tempfile

# Set test environment variables BEFORE any imports
# This must happen at module load time, not in a fixture
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["LOCAL_STORAGE_PATH"] = os.path.join(tempfile.gettempdir(), "djkit-test-storage.json")

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from app.main import app
from app.services.gemini import GeminiService, get_gemini_service
from djkit.schemas import StreamChunk


def streaming(*items):
    """Build a fake `stream_text` yielding chunks, or raising exceptions in place."""
    async def stream_text(request):
        for item in items:
            if isinstance(item, BaseException):
                raise item
            yield item if isinstance(item, StreamChunk) else StreamChunk(text=item)
    return stream_text


@pytest.fixture
def fake_service():
    """GeminiService stand-in with canned provider results."""
    service = MagicMock(spec=GeminiService)
    service.api_key = "test-gemini-key"
    service.stream_text = streaming("Hello ", "world")
    service.generate_image = AsyncMock(return_value="aGVsbG8=")
    service.start_video = AsyncMock(return_value={"name": "operations/1", "done": False})
    service.check_video = AsyncMock(return_value={"name": "operations/1", "done": True})
    return service


@pytest.fixture
def client(fake_service):
    """TestClient with the provider service replaced."""
    app.dependency_overrides[get_gemini_service] = lambda: fake_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def stream_of():
    """Factory for fake `stream_text` implementations."""
    return streaming
