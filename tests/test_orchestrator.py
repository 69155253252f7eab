"""
Tests for the transcript orchestrator.
"""

import asyncio
import pytest

from tubetrans.models.schemas import TranscriptRecord, VideoDetails
from tubetrans.utils.error_handling import (
    EmptyResponseError,
    InvalidUrlError,
    MalformedResponseError,
    ServiceError,
    ServiceUnavailableError,
)


def test_fetch_transcript(orchestrator, mock_ai_client, test_video_url):
    """A valid link yields a record carrying the extracted id."""
    mock_ai_client.request_transcript.return_value = VideoDetails(
        title="T", author="A", transcript="Hello world"
    )

    record = asyncio.run(orchestrator.fetch_transcript(test_video_url))

    assert record == TranscriptRecord(
        title="T",
        author="A",
        video_id="dQw4w9WgXcQ",
        transcript="Hello world",
        translation=None,
    )
    mock_ai_client.request_transcript.assert_awaited_once_with(test_video_url)


def test_fetch_transcript_invalid_url(orchestrator, mock_ai_client):
    """An unrecognised link never reaches the backend."""
    with pytest.raises(InvalidUrlError):
        asyncio.run(orchestrator.fetch_transcript("not a url"))

    mock_ai_client.request_transcript.assert_not_called()


@pytest.mark.parametrize("error", [
    ServiceUnavailableError("down", status_code=503),
    MalformedResponseError("bad json", raw_text="{"),
])
def test_fetch_transcript_service_error(orchestrator, mock_ai_client, test_video_url, error):
    mock_ai_client.request_transcript.side_effect = error

    with pytest.raises(ServiceError) as exc_info:
        asyncio.run(orchestrator.fetch_transcript(test_video_url))

    assert exc_info.value is error


def test_translate(orchestrator, mock_ai_client, record):
    """The translation is added and every other field is kept."""
    mock_ai_client.request_translation.return_value = "হ্যালো"

    translated = asyncio.run(orchestrator.translate(record))

    assert translated.translation == "হ্যালো"
    assert translated.title == record.title
    assert translated.author == record.author
    assert translated.video_id == record.video_id
    assert translated.transcript == record.transcript
    assert record.translation is None
    mock_ai_client.request_translation.assert_awaited_once_with("Hello")


def test_translate_empty_reply(orchestrator, mock_ai_client, record):
    mock_ai_client.request_translation.side_effect = EmptyResponseError("empty")

    with pytest.raises(ServiceError):
        asyncio.run(orchestrator.translate(record))

    assert record.translation is None
    assert record.transcript == "Hello"
    assert not orchestrator.is_translating(record)


def test_translate_blank_transcript_is_noop(orchestrator, mock_ai_client):
    blank = TranscriptRecord(title="T", author="A", video_id="dQw4w9WgXcQ", transcript="  ")

    assert asyncio.run(orchestrator.translate(blank)) is blank
    mock_ai_client.request_translation.assert_not_called()


def test_translate_concurrent_calls_send_one_request(orchestrator, mock_ai_client, record):
    """A second call while the first is running returns the record unchanged."""
    async def run_both():
        release = asyncio.Event()

        async def slow_translation(text):
            await release.wait()
            return "হ্যালো"

        mock_ai_client.request_translation.side_effect = slow_translation

        first = asyncio.create_task(orchestrator.translate(record))
        await asyncio.sleep(0)
        assert orchestrator.is_translating(record)
        second = await orchestrator.translate(record)
        release.set()
        return await first, second

    first, second = asyncio.run(run_both())

    assert first.translation == "হ্যালো"
    assert second is record
    assert mock_ai_client.request_translation.await_count == 1
    assert not orchestrator.is_translating(record)


def test_translate_refetched_record_of_same_video(orchestrator, mock_ai_client, record):
    """A new record for the same video is translated even while the old one is in flight."""
    refetched = TranscriptRecord(**record.model_dump())

    async def run_both():
        release = asyncio.Event()

        async def slow_translation(text):
            await release.wait()
            return "হ্যালো"

        mock_ai_client.request_translation.side_effect = slow_translation

        first = asyncio.create_task(orchestrator.translate(record))
        await asyncio.sleep(0)
        assert not orchestrator.is_translating(refetched)

        second = asyncio.create_task(orchestrator.translate(refetched))
        await asyncio.sleep(0)
        release.set()
        return await first, await second

    first, second = asyncio.run(run_both())

    assert first.translation == "হ্যালো"
    assert second.translation == "হ্যালো"
    assert mock_ai_client.request_translation.await_count == 2
