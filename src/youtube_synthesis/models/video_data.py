"""Data models for video-related information."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNTITLED_VIDEO = "Untitled Video"
UNKNOWN_CHANNEL = "Unknown Channel"


class VideoMetadata(BaseModel):
    """Normalized YouTube video metadata, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    video_id: str
    url: str
    title: str = UNTITLED_VIDEO
    thumbnail: str = ""
    channel_title: str = UNKNOWN_CHANNEL
    published_at: Optional[str] = None
    duration: str = "0:00"
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    subscriber_count: int = 0

    def to_dict(self) -> dict:
        """Convert to the camelCase dictionary returned by the API."""
        return self.model_dump(by_alias=True)


@dataclass
class TranscriptSegment:
    """Represents a single transcript segment with timing."""
    text: str
    start: float
    duration: Optional[float] = None

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + (self.duration or 0)


def join_transcript(segments: List[TranscriptSegment]) -> str:
    """Concatenate segment texts with single spaces, keeping their order."""
    return " ".join(segment.text for segment in segments)


@dataclass
class ProcessedVideo:
    """Metadata and plain transcript text for one video of a project."""
    metadata: VideoMetadata
    transcript: str

    @property
    def video_id(self) -> str:
        return self.metadata.video_id
