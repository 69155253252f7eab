"""
Centralized error handling for the application.
"""

import json
from typing import Dict, Any

from tubetrans.config import config
from tubetrans.utils.logger import logging


GENERIC_FAILURE_MESSAGE = "Failed to retrieve transcript. Please ensure it's a valid YouTube link."
INVALID_URL_MESSAGE = "Invalid YouTube URL. Please paste the full video link (e.g. https://www.youtube.com/watch?v=...)."


class TubeTransError(Exception):
    """Base class for all application errors."""


class InvalidUrlError(TubeTransError):
    """The input could not be recognised as a YouTube video link."""

    def __init__(self, url: str, message: str = INVALID_URL_MESSAGE):
        super().__init__(message)
        self.url = url


class ServiceError(TubeTransError):
    """A request to the generative backend did not produce a usable result."""


class ServiceUnavailableError(ServiceError):
    """The backend could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ServiceError):
    """The backend replied, but the payload is not valid for the requested schema."""

    def __init__(self, message: str, raw_text: str = None):
        super().__init__(message)
        self.raw_text = raw_text


class EmptyResponseError(ServiceError):
    """The backend replied without any text."""


class StateTransitionError(TubeTransError):
    """A view-state event was applied in a state that does not accept it."""


def user_message(error: Exception) -> str:
    """
    Map an exception to the text shown to the user.

    Args:
        error: The exception that occurred

    Returns:
        A message fit for display
    """
    if isinstance(error, InvalidUrlError):
        return str(error)
    return GENERIC_FAILURE_MESSAGE


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, ensure_ascii=False, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
