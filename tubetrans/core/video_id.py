"""
Recognise YouTube links and pull out the video id.
"""

import re

from tubetrans.utils.error_handling import InvalidUrlError


YOUTUBE_URL_REGEX = re.compile(
    r"(?:https?://)?(?:www\.)?"
    r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})"
)

EMBED_URL = "https://www.youtube.com/embed/{video_id}"


def extract_video_id(url: str) -> str:
    """
    Extract the 11-character video id from a YouTube URL.

    Args:
        url: YouTube URL, with or without scheme and www.

    Returns:
        The video id

    Raises:
        InvalidUrlError: If no video id can be found
    """
    match = YOUTUBE_URL_REGEX.search(url or "")
    if not match:
        raise InvalidUrlError(url)
    return match.group(1)


def embed_url(video_id: str) -> str:
    """Get the embeddable player URL for a video id."""
    return EMBED_URL.format(video_id=video_id)
