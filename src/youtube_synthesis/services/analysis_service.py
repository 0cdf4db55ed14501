"""Single-video transcript analysis."""

import json
from typing import Any

from ..core.llm_manager import LLMManager
from ..utils.logging import get_logger

logger = get_logger("analysis_service")

ANALYSIS_PROMPT = (
    "Analyze this YouTube video transcript and extract: "
    "1) Main topics discussed "
    "2) Key points for each topic "
    "3) insights or perspectives "
    "4) Supporting data or statistics mentioned. "
    "Format the response as JSON."
)


class AnalysisService:
    """Turns one transcript into a provider-shaped JSON analysis."""

    def __init__(self, llm_manager: LLMManager):
        self.llm_manager = llm_manager

    async def analyze_transcript(self, transcript: str) -> Any:
        """
        Analyze a transcript.

        The response content is decoded as-is; its shape is not validated.

        Raises:
            json.JSONDecodeError: If the model does not return JSON
        """
        logger.info(f"Analyzing transcript ({len(transcript)} chars)")
        content = await self.llm_manager.complete(ANALYSIS_PROMPT, transcript)
        return json.loads(content)
