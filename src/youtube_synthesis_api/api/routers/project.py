"""Project router: multi-video synthesis and the save stub."""

import logging

from fastapi import APIRouter, Body, Depends

from youtube_synthesis.workflows import ProjectWorkflow

from ...api.models.base import ErrorResponse
from ...api.models.project import (
    ProcessProjectRequest,
    ProcessProjectResponse,
    SaveProjectRequest,
    SaveProjectResponse,
)
from ...dependencies import get_project_workflow
from ...exceptions import ProjectProcessingError, ProjectSaveError

router = APIRouter()
logger = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Project saved successfully"


@router.post(
    "/process-project",
    response_model=ProcessProjectResponse,
    responses={500: {"model": ErrorResponse}}
)
async def process_project(
    request: ProcessProjectRequest = Body(default_factory=ProcessProjectRequest),
    workflow: ProjectWorkflow = Depends(get_project_workflow)
):
    """
    Process several videos concurrently and synthesize them.

    Videos are returned in request order. A failure for any video fails the
    whole project.

    Args:
        request: Process project request
        workflow: ProjectWorkflow instance

    Returns:
        Video metadata, the synthesis and title suggestions

    Raises:
        ProjectProcessingError: If any video or model call fails
    """
    try:
        result = await workflow.process_project(request.urls)
    except Exception:
        logger.exception(f"Error processing project (urls: {request.urls!r})")
        raise ProjectProcessingError()

    return ProcessProjectResponse(
        videos=result.videos,
        synthesis=result.synthesis,
        title_suggestions=result.title_suggestions
    )


@router.post(
    "/save-project",
    response_model=SaveProjectResponse,
    responses={500: {"model": ErrorResponse}}
)
async def save_project(request: SaveProjectRequest = Body(default_factory=SaveProjectRequest)):
    """
    Acknowledge a project save.

    Nothing is persisted; the received fields are echoed back unchanged.
    """
    try:
        data = request.received_fields()
    except Exception:
        logger.exception("Error saving project")
        raise ProjectSaveError()

    logger.info(f"Project save requested (fields: {', '.join(data) or 'none'})")
    return SaveProjectResponse(message=SAVE_SUCCESS_MESSAGE, data=data)
