"""Custom exceptions for the FastAPI backend."""

import json


class APIError(Exception):
    """Base API exception class."""

    def __init__(
        self,
        detail: str,
        status_code: int = 500,
        error_code: str = "API_ERROR"
    ):
        self.detail = detail
        self.message = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)

    def to_dict(self) -> dict:
        """Response body for this error."""
        return {"error": self.message}

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict())


class InvalidURLError(APIError):
    """The submitted URL has no recognizable video ID."""

    def __init__(self, detail: str = "Invalid YouTube URL"):
        super().__init__(
            detail=detail,
            status_code=400,
            error_code="INVALID_URL"
        )


class InternalServerError(APIError):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            detail=detail,
            status_code=500,
            error_code="INTERNAL_ERROR"
        )


class VideoProcessingError(InternalServerError):
    """Processing a single video failed."""

    def __init__(self, detail: str = "Error processing video"):
        super().__init__(detail)
        self.error_code = "VIDEO_PROCESSING_ERROR"


class ProjectProcessingError(InternalServerError):
    """Processing a multi-video project failed."""

    def __init__(self, detail: str = "Error processing project"):
        super().__init__(detail)
        self.error_code = "PROJECT_PROCESSING_ERROR"


class ProjectSaveError(InternalServerError):
    """Saving a project failed."""

    def __init__(self, detail: str = "Error saving project"):
        super().__init__(detail)
        self.error_code = "PROJECT_SAVE_ERROR"
