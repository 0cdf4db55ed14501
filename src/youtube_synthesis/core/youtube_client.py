"""YouTube Data API client for video and channel metadata."""

import re
from typing import Any, Dict, Optional

import httpx

from ..models import UNKNOWN_CHANNEL, UNTITLED_VIDEO, VideoMetadata
from ..utils.logging import get_logger
from ..utils.youtube_utils import build_watch_url
from .config import YouTubeConfig, config

logger = get_logger("youtube_client")

_DURATION_PATTERN = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?')
_COUNT_PATTERN = re.compile(r'[0-9]+')


class MetadataFetchError(Exception):
    """Raised when video metadata cannot be retrieved."""


class VideoNotFoundError(MetadataFetchError):
    """The videos endpoint returned no items."""


class ChannelNotFoundError(MetadataFetchError):
    """The channels endpoint returned no items."""


def parse_duration(duration: Optional[str]) -> str:
    """
    Convert an ISO-8601 ``PT#H#M#S`` token into a clock string.

    ``PT1H2M3S`` becomes ``1:02:03``, ``PT5M9S`` becomes ``5:09`` and
    ``PT45S`` becomes ``0:45``. Unrecognized tokens render as ``0:00``.
    """
    match = _DURATION_PATTERN.match(duration or "")
    if not match:
        logger.debug(f"Unrecognized duration token: {duration!r}")
        return "0:00"

    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def safe_parse_int(value: Any) -> int:
    """Parse an integer statistic, returning 0 for missing or non-numeric values."""
    if value is None:
        return 0
    text = str(value).strip()
    # ASCII digits only, no sign or underscores
    if not _COUNT_PATTERN.fullmatch(text):
        return 0
    return int(text)


class YouTubeClient:
    """Async client for the YouTube Data API v3 ``videos`` and ``channels`` resources."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        youtube_config: Optional[YouTubeConfig] = None
    ):
        self.http_client = http_client
        self.config = youtube_config or config.youtube
        logger.info("Initialized YouTubeClient")

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    async def _get_first_item(self, resource: str, params: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """GET a Data API resource and return its first item, if any."""
        response = await self.http_client.get(
            f"{self.config.api_base_url}/{resource}",
            params={**params, "key": self.api_key}
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise MetadataFetchError(f"Unexpected {resource} response: {type(payload).__name__}")

        items = payload.get("items") or []
        if not items:
            return None
        if not isinstance(items, list) or not isinstance(items[0], dict):
            raise MetadataFetchError(f"Unexpected {resource} item in response")
        return items[0]

    async def get_video_metadata(self, video_id: str) -> VideoMetadata:
        """
        Fetch and normalize metadata for a video and its channel.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoMetadata for the video

        Raises:
            MetadataFetchError: If the key is missing, the video or channel
                does not exist, or any request fails
        """
        if not self.api_key:
            raise MetadataFetchError("YouTube API key not configured")

        try:
            video = await self._get_first_item(
                "videos",
                {"part": "snippet,statistics,contentDetails", "id": video_id}
            )
            if video is None:
                raise VideoNotFoundError("Video not found")

            snippet = video.get("snippet") or {}
            statistics = video.get("statistics") or {}
            content_details = video.get("contentDetails") or {}

            channel = await self._get_first_item(
                "channels",
                {"part": "statistics", "id": snippet.get("channelId", "")}
            )
            if channel is None:
                raise ChannelNotFoundError("Channel not found")

            channel_statistics = channel.get("statistics") or {}
            thumbnail = ((snippet.get("thumbnails") or {}).get("medium") or {}).get("url") or ""

            metadata = VideoMetadata(
                video_id=str(video_id),
                url=build_watch_url(video_id),
                title=snippet.get("title") or UNTITLED_VIDEO,
                thumbnail=thumbnail,
                channel_title=snippet.get("channelTitle") or UNKNOWN_CHANNEL,
                published_at=snippet.get("publishedAt"),
                duration=parse_duration(content_details.get("duration")),
                view_count=safe_parse_int(statistics.get("viewCount")),
                like_count=safe_parse_int(statistics.get("likeCount")),
                comment_count=safe_parse_int(statistics.get("commentCount")),
                subscriber_count=safe_parse_int(channel_statistics.get("subscriberCount"))
            )
        except (MetadataFetchError, httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
            logger.error(f"Error fetching video metadata for {video_id}: {e}")
            raise MetadataFetchError(f"Failed to fetch metadata: {e}") from e

        logger.info(f"Retrieved video metadata: {metadata.title}")
        return metadata
