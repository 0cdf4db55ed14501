"""Data models for YouTube synthesis."""

from .analysis_result import (
    SYNTHESIS_KEYS,
    SynthesisResult,
    TitleSuggestions,
    title_suggestions_adapter,
)
from .video_data import (
    UNKNOWN_CHANNEL,
    UNTITLED_VIDEO,
    ProcessedVideo,
    TranscriptSegment,
    VideoMetadata,
    join_transcript,
)

__all__ = [
    "SYNTHESIS_KEYS",
    "SynthesisResult",
    "TitleSuggestions",
    "title_suggestions_adapter",
    "UNKNOWN_CHANNEL",
    "UNTITLED_VIDEO",
    "ProcessedVideo",
    "TranscriptSegment",
    "VideoMetadata",
    "join_transcript",
]
