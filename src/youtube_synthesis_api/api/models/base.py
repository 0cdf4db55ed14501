"""Base response models for the API."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint."""

    error: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)
