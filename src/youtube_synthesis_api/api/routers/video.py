"""Single-video router."""

import logging

from fastapi import APIRouter, Body, Depends

from youtube_synthesis.utils.youtube_utils import extract_video_id
from youtube_synthesis.workflows import ProjectWorkflow

from ...api.models.base import ErrorResponse
from ...api.models.video import ProcessVideoRequest, ProcessVideoResponse
from ...dependencies import get_project_workflow
from ...exceptions import InvalidURLError, VideoProcessingError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/process-video",
    response_model=ProcessVideoResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def process_video(
    request: ProcessVideoRequest = Body(default_factory=ProcessVideoRequest),
    workflow: ProjectWorkflow = Depends(get_project_workflow)
):
    """
    Fetch metadata and transcript for one video and analyze it.

    Args:
        request: Process video request
        workflow: ProjectWorkflow instance

    Returns:
        Video metadata and the model's analysis

    Raises:
        InvalidURLError: If no video ID can be extracted from the URL
        VideoProcessingError: If any upstream step fails
    """
    video_id = extract_video_id(request.url)
    if not video_id:
        raise InvalidURLError()

    try:
        result = await workflow.process_video(video_id)
    except Exception:
        logger.exception(f"Error processing video {video_id}")
        raise VideoProcessingError()

    return ProcessVideoResponse(metadata=result.metadata, analysis=result.analysis)
