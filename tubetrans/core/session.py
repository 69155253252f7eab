"""
Viewer session: owns the view state and applies orchestrator results to it.
"""

from typing import Callable, List, Optional

from tubetrans.core import view_state
from tubetrans.core.orchestrator import TranscriptOrchestrator
from tubetrans.core.prompts import TRANSLATION_FAILED_MESSAGE
from tubetrans.models.schemas import AppStatus, Notification, TranscriptRecord, ViewState
from tubetrans.utils.error_handling import (
    GENERIC_FAILURE_MESSAGE,
    ServiceError,
    TubeTransError,
    log_diagnostic_info,
    user_message,
)
from tubetrans.utils.logger import logging

Listener = Callable[[Notification], None]


class TranscriptSession:
    """State of one viewer, driven by user intents."""

    def __init__(self, orchestrator: TranscriptOrchestrator):
        self.orchestrator = orchestrator
        self.state: ViewState = view_state.idle()
        self._generation = 0
        self._listeners: List[Listener] = []

    @property
    def record(self) -> Optional[TranscriptRecord]:
        return self.state.record

    def subscribe(self, listener: Listener) -> None:
        """Register a callback for transient notifications."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, message: str, level: str = "error") -> None:
        notification = Notification(level=level, message=message)
        for listener in list(self._listeners):
            listener(notification)

    async def submit(self, url: str) -> ViewState:
        """
        Fetch the transcript for a link.

        Only the newest submission may update the state; results of older
        ones that finish later are dropped.

        Args:
            url: YouTube URL typed by the user

        Returns:
            The state after the request was handled
        """
        if not url or not url.strip():
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = view_state.start_loading(self.state)

        try:
            record = await self.orchestrator.fetch_transcript(url.strip())
        except TubeTransError as e:
            if generation == self._generation:
                logging.warning(f"Transcript request failed: {e}")
                self.state = view_state.load_failed(self.state, user_message(e))
            else:
                logging.info(f"Discarding stale failure of request {generation}")
            return self.state
        except Exception as e:
            logging.exception(f"Unexpected error while fetching transcript: {e}")
            if generation == self._generation:
                self.state = view_state.load_failed(self.state, GENERIC_FAILURE_MESSAGE)
            return self.state

        if generation != self._generation:
            logging.info(f"Discarding stale result of request {generation} ({record.video_id})")
            return self.state

        self.state = view_state.load_succeeded(self.state, record)
        log_diagnostic_info({"generation": generation, "video_id": record.video_id, "title": record.title})
        return self.state

    def _is_current(self, record: TranscriptRecord) -> bool:
        return (
            self.state.status == AppStatus.SUCCESS
            and self.state.is_translating
            and self.state.record is record
        )

    async def request_translation(self) -> ViewState:
        """
        Translate the current record.

        A failure keeps the record as it was and is reported through the
        notification channel instead of the error state.

        Returns:
            The state after the request was handled
        """
        if self.state.status != AppStatus.SUCCESS or self.state.is_translating:
            return self.state

        record = self.state.record
        self.state = view_state.start_translation(self.state)

        try:
            translated = await self.orchestrator.translate(record)
        except ServiceError as e:
            logging.error(f"Translation error: {e}")
            if self._is_current(record):
                self.state = view_state.translation_failed(self.state)
                self.notify(TRANSLATION_FAILED_MESSAGE)
            return self.state
        except Exception as e:
            logging.exception(f"Unexpected error while translating: {e}")
            if self._is_current(record):
                self.state = view_state.translation_failed(self.state)
                self.notify(TRANSLATION_FAILED_MESSAGE)
            return self.state

        if not self._is_current(record):
            logging.info(f"Discarding translation for replaced record {record.video_id}")
            return self.state

        self.state = view_state.translation_succeeded(self.state, translated)
        return self.state
