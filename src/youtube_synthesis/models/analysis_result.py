"""Models for structured model output."""

from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter

SYNTHESIS_KEYS = ("commonThemes", "differentPerspectives", "contentGaps", "suggestedOutline")


class SynthesisResult(BaseModel):
    """Cross-video analysis of a project's transcripts."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    commonThemes: List[str]
    differentPerspectives: List[str]
    contentGaps: List[str]
    suggestedOutline: List[str]

    def to_dict(self) -> dict:
        return self.model_dump()


# Nominally five titles; the count is not enforced.
TitleSuggestions = List[str]

title_suggestions_adapter = TypeAdapter(TitleSuggestions)
