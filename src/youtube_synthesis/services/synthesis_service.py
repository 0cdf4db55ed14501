"""Cross-video synthesis and title suggestions."""

import json
from typing import List, Sequence, Tuple

from pydantic import ValidationError

from ..core.llm_manager import LLMManager
from ..models import SynthesisResult, TitleSuggestions, title_suggestions_adapter
from ..utils.json_utils import parse_json_response
from ..utils.logging import get_logger

logger = get_logger("synthesis_service")

TRANSCRIPT_SEPARATOR = "\n\n"

SYNTHESIS_PROMPT = """Analyze these YouTube video transcripts and provide a valid JSON object with the following keys:
- commonThemes: array of common themes and topics across videos
- differentPerspectives: array of different viewpoints on similar topics
- contentGaps: array of potential content opportunities
- suggestedOutline: array of sections for a new video
All values should be arrays of strings. Return only JSON without markdown formatting."""

TITLES_PROMPT = (
    "Based on this content analysis, generate 5 engaging YouTube video titles. "
    "Make sure the titles resemble those of popular YouTube videos "
    "(avoid blog title or book title styles). "
    "Return as a JSON array of strings."
)


class LLMResponseValidationError(ValueError):
    """Model output decoded as JSON but does not have the expected shape."""


class SynthesisService:
    """Runs the two dependent synthesis calls for a project."""

    def __init__(self, llm_manager: LLMManager):
        self.llm_manager = llm_manager

    async def synthesize(self, transcripts: Sequence[str]) -> SynthesisResult:
        """
        Produce themes, perspectives, gaps and an outline across transcripts.

        Args:
            transcripts: Transcript texts in project order

        Returns:
            Validated SynthesisResult

        Raises:
            json.JSONDecodeError: If the response is not JSON
            LLMResponseValidationError: If the JSON does not match the schema
        """
        combined_text = TRANSCRIPT_SEPARATOR.join(transcripts)
        logger.info(f"Synthesizing {len(transcripts)} transcripts ({len(combined_text)} chars)")

        raw = await self.llm_manager.complete(SYNTHESIS_PROMPT, combined_text, json_mode=True)
        data = parse_json_response(raw)
        try:
            return SynthesisResult.model_validate(data)
        except ValidationError as e:
            raise LLMResponseValidationError(f"Synthesis response has an invalid shape: {e}") from e

    async def suggest_titles(self, synthesis: SynthesisResult) -> TitleSuggestions:
        """
        Suggest video titles seeded with a synthesis.

        Raises:
            json.JSONDecodeError: If the response is not JSON
            LLMResponseValidationError: If the JSON is not an array of strings
        """
        raw = await self.llm_manager.complete(TITLES_PROMPT, json.dumps(synthesis.to_dict()))
        data = parse_json_response(raw)
        try:
            titles: List[str] = title_suggestions_adapter.validate_python(data, strict=True)
        except ValidationError as e:
            raise LLMResponseValidationError(f"Title response is not an array of strings: {e}") from e

        logger.info(f"Generated {len(titles)} title suggestions")
        return titles

    async def synthesize_project(self, transcripts: Sequence[str]) -> Tuple[SynthesisResult, TitleSuggestions]:
        """Run the synthesis, then the title suggestions built from it."""
        synthesis = await self.synthesize(transcripts)
        titles = await self.suggest_titles(synthesis)
        return synthesis, titles
