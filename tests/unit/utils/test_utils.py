"""Unit tests for utility functions."""

import json

import pytest

from youtube_synthesis.utils.json_utils import clean_json_response, parse_json_response
from youtube_synthesis.utils.youtube_utils import (
    extract_video_id,
    is_youtube_url,
    normalize_youtube_url,
)


class TestYouTubeUrlUtils:
    """Tests for YouTube URL utility functions."""

    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("http://youtu.be/dQw4w9WgXcQ?si=abc", "dQw4w9WgXcQ"),
    ])
    def test_extract_video_id(self, url, expected):
        """Each supported URL shape yields the ID exactly."""
        assert extract_video_id(url) == expected

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "https://vimeo.com/12345",
        "https://www.youtube.com/channel/UC123",
        "invalid-url",
        "",
        None,
        12345,
    ])
    def test_extract_video_id_invalid(self, url):
        """Unsupported, empty and non-string input yields None."""
        assert extract_video_id(url) is None
        assert is_youtube_url(url) is False

    def test_first_matching_pattern_wins(self):
        """A watch URL that mentions another shape still uses the watch ID."""
        url = "https://www.youtube.com/watch?v=abc123&list=youtu.be/zzz"
        assert extract_video_id(url) == "abc123"

    @pytest.mark.parametrize("url,expected", [
        ("https://youtu.be/dQw4w9WgXcQ", "https://youtube.com/watch?v=dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "https://youtube.com/watch?v=dQw4w9WgXcQ"),
        ("https://example.com", None),
        (None, None),
    ])
    def test_normalize_youtube_url(self, url, expected):
        """URLs normalize to the canonical watch form."""
        assert normalize_youtube_url(url) == expected


class TestJsonUtils:
    """Tests for model response cleanup."""

    def test_clean_json_response_strips_fences(self):
        raw = '```json\n{"a": [1, 2]}\n```'
        assert clean_json_response(raw) == '{"a": [1, 2]}'

    def test_clean_json_response_plain_fence(self):
        assert clean_json_response('```\n["x"]\n```  ') == '["x"]'

    def test_clean_json_response_leaves_plain_json(self):
        assert clean_json_response('  {"a": 1} ') == '{"a": 1}'

    def test_parse_json_response(self):
        assert parse_json_response('```json\n["one", "two"]\n```') == ["one", "two"]

    def test_parse_json_response_without_stripping(self):
        with pytest.raises(json.JSONDecodeError):
            parse_json_response('```json\n["one"]\n```', strip_fences=False)
