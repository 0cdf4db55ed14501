"""API models package."""

from .base import ErrorResponse, HealthResponse
from .project import (
    ProcessProjectRequest,
    ProcessProjectResponse,
    SaveProjectRequest,
    SaveProjectResponse,
)
from .video import ProcessVideoRequest, ProcessVideoResponse

__all__ = [
    # Base models
    "ErrorResponse",
    "HealthResponse",

    # Video models
    "ProcessVideoRequest",
    "ProcessVideoResponse",

    # Project models
    "ProcessProjectRequest",
    "ProcessProjectResponse",
    "SaveProjectRequest",
    "SaveProjectResponse",
]
