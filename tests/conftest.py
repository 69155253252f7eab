"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Must be set before tubetrans.config is imported
os.environ.setdefault("GEMINI_API_KEY", "test_api_key")
os.environ.setdefault("ENVIRONMENT", "development")

from tubetrans.core.ai_client import GeminiClient
from tubetrans.core.orchestrator import TranscriptOrchestrator
from tubetrans.models.schemas import TranscriptRecord
from tubetrans.utils.logger import console_handler


def make_response(text):
    """Build a stand-in for a generate_content response."""
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def mock_genai_client():
    """Fixture to mock the google-genai client."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def gemini_client(mock_genai_client):
    return GeminiClient(api_key="test_api_key", model="test-model", client=mock_genai_client)


@pytest.fixture
def mock_ai_client():
    """Fixture to mock the GeminiClient used by the orchestrator."""
    ai_client = MagicMock(spec=GeminiClient)
    ai_client.request_transcript = AsyncMock()
    ai_client.request_translation = AsyncMock()
    return ai_client


@pytest.fixture
def orchestrator(mock_ai_client):
    return TranscriptOrchestrator(mock_ai_client)


@pytest.fixture
def record():
    """Fixture to create a TranscriptRecord."""
    return TranscriptRecord(
        title="T",
        author="A",
        video_id="dQw4w9WgXcQ",
        transcript="Hello",
    )


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture(autouse=True)
def restore_console_stream():
    """The command line moves console logging to stderr; undo that between tests."""
    stream = console_handler.stream
    yield
    # Assign directly: setStream() would flush the (possibly already closed) capture stream.
    console_handler.stream = stream
