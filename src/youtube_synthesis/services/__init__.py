"""Service layer for YouTube synthesis."""

from .analysis_service import ANALYSIS_PROMPT, AnalysisService
from .synthesis_service import (
    SYNTHESIS_PROMPT,
    TITLES_PROMPT,
    LLMResponseValidationError,
    SynthesisService,
)

__all__ = [
    "ANALYSIS_PROMPT",
    "AnalysisService",
    "SYNTHESIS_PROMPT",
    "TITLES_PROMPT",
    "LLMResponseValidationError",
    "SynthesisService",
]
