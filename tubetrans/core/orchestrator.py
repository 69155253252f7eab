"""
Module composing link recognition and the Gemini requests.
"""

from typing import Set

from tubetrans.core.ai_client import GeminiClient
from tubetrans.core.video_id import extract_video_id
from tubetrans.models.schemas import TranscriptRecord
from tubetrans.utils.logger import logging


class TranscriptOrchestrator:
    """Fetches transcript records and their translations."""

    def __init__(self, ai_client: GeminiClient):
        self.ai_client = ai_client
        # Keyed by object identity: a re-fetched video is a new record
        self._translations_in_flight: Set[int] = set()

    async def fetch_transcript(self, url: str) -> TranscriptRecord:
        """
        Build a transcript record for a YouTube link.

        Args:
            url: YouTube video URL

        Returns:
            TranscriptRecord without a translation

        Raises:
            InvalidUrlError: If the link is not a YouTube video link, before any request
            ServiceError: If the backend request fails or its reply is unusable
        """
        video_id = extract_video_id(url)
        details = await self.ai_client.request_transcript(url)
        return TranscriptRecord.from_details(details, video_id)

    def is_translating(self, record: TranscriptRecord) -> bool:
        return id(record) in self._translations_in_flight

    async def translate(self, record: TranscriptRecord) -> TranscriptRecord:
        """
        Translate the transcript of a record.

        A call made while a translation of this same record is running, or
        for a record without transcript text, returns the record unchanged.

        Args:
            record: Record to translate

        Returns:
            A new record with the translation set

        Raises:
            ServiceError: If the translation request fails; the record is not touched
        """
        if self.is_translating(record) or not record.transcript.strip():
            logging.debug(f"Skipping translation for video {record.video_id}")
            return record

        self._translations_in_flight.add(id(record))
        try:
            translation = await self.ai_client.request_translation(record.transcript)
        finally:
            self._translations_in_flight.discard(id(record))

        return record.with_translation(translation)
