"""Project models for the API."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from youtube_synthesis.models import SynthesisResult, VideoMetadata


class ProcessProjectRequest(BaseModel):
    """Process project request model."""

    # Not validated here so that any malformed list fails as a project error (500)
    urls: Any = Field(default=None, description="YouTube video URLs")


class ProcessProjectResponse(BaseModel):
    """Process project response model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    videos: List[VideoMetadata]
    synthesis: SynthesisResult
    title_suggestions: List[str]


class SaveProjectRequest(BaseModel):
    """Save project request model. Field values are not validated."""

    # Keys are read by their camelCase names only
    model_config = ConfigDict(alias_generator=to_camel)

    project_name: Any = None
    videos: Any = None
    synthesis: Any = None

    def received_fields(self) -> Dict[str, Any]:
        """The fields present in the request body, keyed as received."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class SaveProjectResponse(BaseModel):
    """Save project response model."""

    message: str
    data: Dict[str, Any]
