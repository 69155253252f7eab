"""
Tests for YouTube link recognition.
"""

import pytest

from tubetrans.core.video_id import extract_video_id, embed_url
from tubetrans.utils.error_handling import InvalidUrlError, INVALID_URL_MESSAGE

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ",
    "www.youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "youtube.com/embed/dQw4w9WgXcQ?start=10",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://www.youtube.com/e/dQw4w9WgXcQ",
    "https://www.youtube.com/user/someone/dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    """Every recognised link shape yields the same id."""
    assert extract_video_id(url) == VIDEO_ID


def test_extract_video_id_keeps_dash_and_underscore():
    assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


@pytest.mark.parametrize("url", [
    "not a url",
    "",
    "   ",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://vimeo.com/123456789",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/",
    "https://youtu.be/",
    "dQw4w9WgXcQ",
])
def test_extract_video_id_invalid(url):
    with pytest.raises(InvalidUrlError) as exc_info:
        extract_video_id(url)

    assert exc_info.value.url == url
    assert str(exc_info.value) == INVALID_URL_MESSAGE
    assert "full video link" in str(exc_info.value)


def test_extract_video_id_none():
    with pytest.raises(InvalidUrlError):
        extract_video_id(None)


def test_embed_url():
    assert embed_url(VIDEO_ID) == "https://www.youtube.com/embed/dQw4w9WgXcQ"
