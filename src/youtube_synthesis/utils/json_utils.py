"""Helpers for reading JSON out of model responses."""

import json
import re
from typing import Any

_FENCE_PATTERN = re.compile(r"```(?:json)?")


def clean_json_response(raw: str) -> str:
    """Remove markdown code fences (```json / ```) and surrounding whitespace."""
    return _FENCE_PATTERN.sub("", raw or "").strip()


def parse_json_response(raw: str, strip_fences: bool = True) -> Any:
    """
    Parse a model response as JSON.

    Args:
        raw: Raw message content
        strip_fences: Remove markdown code fences before parsing

    Returns:
        Decoded JSON value

    Raises:
        json.JSONDecodeError: If the content is not valid JSON
    """
    text = clean_json_response(raw) if strip_fences else raw
    return json.loads(text)
