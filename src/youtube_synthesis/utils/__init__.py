"""Utility modules for YouTube synthesis."""

from .json_utils import clean_json_response, parse_json_response
from .logging import get_logger
from .youtube_utils import (
    build_watch_url,
    extract_video_id,
    is_youtube_url,
    normalize_youtube_url,
)

__all__ = [
    "build_watch_url",
    "clean_json_response",
    "extract_video_id",
    "get_logger",
    "is_youtube_url",
    "normalize_youtube_url",
    "parse_json_response",
]
