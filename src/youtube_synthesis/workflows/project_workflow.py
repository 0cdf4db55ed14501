"""Workflows composing metadata, transcripts and model calls."""

import asyncio
from dataclasses import dataclass
from typing import Any, List, Sequence

from ..core.transcript_fetcher import TranscriptFetcher
from ..core.youtube_client import YouTubeClient
from ..models import ProcessedVideo, SynthesisResult, TitleSuggestions, VideoMetadata
from ..services import AnalysisService, SynthesisService
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("project_workflow")


class InvalidVideoURLError(ValueError):
    """A URL did not contain a recognizable video ID."""

    def __init__(self, url: Any):
        self.url = url
        super().__init__(f"Invalid YouTube URL: {url!r}")


class EmptyProjectError(ValueError):
    """A project was submitted without any URLs."""


@dataclass
class VideoAnalysis:
    """Result of processing a single video."""
    metadata: VideoMetadata
    analysis: Any


@dataclass
class ProjectSynthesis:
    """Result of processing a multi-video project."""
    videos: List[VideoMetadata]
    synthesis: SynthesisResult
    title_suggestions: TitleSuggestions


class ProjectWorkflow:
    """
    Orchestrates the single-video and multi-video flows.

    Features:
    - Sequential metadata, transcript and analysis steps for one video
    - Concurrent fan-out over project videos with input order preserved
    - Synthesis followed by title suggestions
    """

    def __init__(
        self,
        youtube_client: YouTubeClient,
        transcript_fetcher: TranscriptFetcher,
        analysis_service: AnalysisService,
        synthesis_service: SynthesisService
    ):
        self.youtube_client = youtube_client
        self.transcript_fetcher = transcript_fetcher
        self.analysis_service = analysis_service
        self.synthesis_service = synthesis_service
        logger.info("Initialized ProjectWorkflow")

    async def process_video(self, video_id: str) -> VideoAnalysis:
        """Fetch metadata, then the transcript, then analyze it."""
        logger.info(f"Processing video {video_id}")
        metadata = await self.youtube_client.get_video_metadata(video_id)
        transcript = await self.transcript_fetcher.fetch_text(video_id)
        analysis = await self.analysis_service.analyze_transcript(transcript)
        logger.info(f"Video {video_id} processed")
        return VideoAnalysis(metadata=metadata, analysis=analysis)

    async def _collect_video(self, url: str) -> ProcessedVideo:
        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidVideoURLError(url)

        metadata, transcript = await asyncio.gather(
            self.youtube_client.get_video_metadata(video_id),
            self.transcript_fetcher.fetch_text(video_id)
        )
        return ProcessedVideo(metadata=metadata, transcript=transcript)

    async def collect_videos(self, urls: Sequence[str]) -> List[ProcessedVideo]:
        """
        Fetch metadata and transcripts for every URL concurrently.

        Results follow the order of ``urls``. The first failing branch fails
        the whole batch.
        """
        return list(await asyncio.gather(*(self._collect_video(url) for url in urls)))

    async def process_project(self, urls: Sequence[str]) -> ProjectSynthesis:
        """Collect all videos, then synthesize them and suggest titles."""
        if not urls:
            raise EmptyProjectError("A project needs at least one video URL")

        logger.info(f"Processing project with {len(urls)} videos")
        videos = await self.collect_videos(urls)
        synthesis, titles = await self.synthesis_service.synthesize_project(
            [video.transcript for video in videos]
        )
        logger.info(f"Project processed ({len(videos)} videos, {len(titles)} titles)")
        return ProjectSynthesis(
            videos=[video.metadata for video in videos],
            synthesis=synthesis,
            title_suggestions=titles
        )
