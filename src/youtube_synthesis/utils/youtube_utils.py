"""YouTube utility functions."""

import re
from typing import Optional

from .logging import get_logger

logger = get_logger("youtube_utils")

# Checked in order; the first pattern that matches wins.
VIDEO_ID_PATTERNS = [
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/watch\?v=([^&]+)'),
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/embed/([^/?]+)'),
    re.compile(r'(?:https?://)?(?:www\.)?youtu\.be/([^/?]+)'),
]

WATCH_URL = "https://youtube.com/watch?v={video_id}"


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract video ID from YouTube URL.

    Supports ``youtube.com/watch?v=``, ``youtube.com/embed/`` and
    ``youtu.be/`` links.

    Args:
        url: YouTube URL

    Returns:
        Video ID if found, None otherwise
    """
    if not url:
        return None

    try:
        for pattern in VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
    except TypeError as e:
        logger.error(f"Error extracting video ID: {e}")

    return None


def is_youtube_url(url: Optional[str]) -> bool:
    """Check whether a video ID can be extracted from the URL."""
    return extract_video_id(url) is not None


def build_watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)


def normalize_youtube_url(url: Optional[str]) -> Optional[str]:
    """
    Normalize YouTube URL to the canonical watch format.

    Args:
        url: YouTube URL

    Returns:
        Normalized URL if valid, None otherwise
    """
    video_id = extract_video_id(url)
    if not video_id:
        return None

    return build_watch_url(video_id)
