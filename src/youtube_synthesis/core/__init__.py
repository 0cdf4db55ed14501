"""Core modules for YouTube synthesis."""

from .config import config
from .llm_manager import LLMConfig, LLMManager
from .transcript_fetcher import (
    TranscriptError,
    TranscriptFetcher,
    TranscriptUnavailableError,
)
from .youtube_client import (
    ChannelNotFoundError,
    MetadataFetchError,
    VideoNotFoundError,
    YouTubeClient,
    parse_duration,
    safe_parse_int,
)

__all__ = [
    'config',
    'LLMConfig',
    'LLMManager',
    'TranscriptError',
    'TranscriptFetcher',
    'TranscriptUnavailableError',
    'ChannelNotFoundError',
    'MetadataFetchError',
    'VideoNotFoundError',
    'YouTubeClient',
    'parse_duration',
    'safe_parse_int',
]
