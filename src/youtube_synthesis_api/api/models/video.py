"""Single-video models for the API."""

from typing import Any

from pydantic import BaseModel, Field

from youtube_synthesis.models import VideoMetadata


class ProcessVideoRequest(BaseModel):
    """Process video request model."""

    # Optional so that a missing URL is reported as an invalid URL (400)
    url: Any = Field(default=None, description="YouTube video URL")


class ProcessVideoResponse(BaseModel):
    """Process video response model."""

    metadata: VideoMetadata
    analysis: Any = None
