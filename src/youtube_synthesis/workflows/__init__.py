"""Workflows for YouTube synthesis."""

from .project_workflow import (
    EmptyProjectError,
    InvalidVideoURLError,
    ProjectSynthesis,
    ProjectWorkflow,
    VideoAnalysis,
)

__all__ = [
    "EmptyProjectError",
    "InvalidVideoURLError",
    "ProjectSynthesis",
    "ProjectWorkflow",
    "VideoAnalysis",
]
