"""
Caption retrieval built on youtube-transcript-api.

The library is synchronous, so fetches run in a worker thread to keep the
event loop free while several videos are processed at once.
"""

import asyncio
from typing import List, Optional, Sequence

import requests
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from ..models import TranscriptSegment, join_transcript
from ..utils.logging import get_logger
from .config import config

logger = get_logger("transcript_fetcher")


class TranscriptError(Exception):
    """Base class for transcript-related errors."""
    pass


class TranscriptUnavailableError(TranscriptError):
    """Transcript is not available for this video."""
    pass


class TranscriptFetcher:
    """Fetches time-ordered caption segments for a video ID."""

    def __init__(
        self,
        api: Optional[YouTubeTranscriptApi] = None,
        languages: Optional[Sequence[str]] = None
    ):
        self.api = api or YouTubeTranscriptApi()
        self.languages = list(languages or config.youtube.transcript_languages)
        logger.info(f"Initialized TranscriptFetcher (languages: {', '.join(self.languages)})")

    def _fetch_sync(self, video_id: str) -> List[TranscriptSegment]:
        fetched = self.api.fetch(video_id, languages=self.languages)
        return [
            TranscriptSegment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched
        ]

    async def fetch_segments(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch caption segments in their original time order.

        Args:
            video_id: YouTube video ID

        Returns:
            List of transcript segments

        Raises:
            TranscriptUnavailableError: If the video has no captions or is unavailable
            TranscriptError: If the caption service cannot be reached
        """
        try:
            segments = await asyncio.to_thread(self._fetch_sync, video_id)
        except CouldNotRetrieveTranscript as e:
            logger.warning(f"No transcript for {video_id}: {type(e).__name__}")
            raise TranscriptUnavailableError(f"Transcript not available for video {video_id}") from e
        except requests.RequestException as e:
            logger.error(f"Error fetching transcript for {video_id}: {e}")
            raise TranscriptError(f"Failed to fetch transcript for video {video_id}: {e}") from e

        if not segments:
            raise TranscriptUnavailableError(f"Transcript is empty for video {video_id}")

        logger.info(f"Retrieved transcript for {video_id} ({len(segments)} segments)")
        return segments

    async def fetch_text(self, video_id: str) -> str:
        """Fetch the transcript as one space-joined string."""
        segments = await self.fetch_segments(video_id)
        return join_transcript(segments)
