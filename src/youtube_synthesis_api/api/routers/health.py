"""Health check router."""

from fastapi import APIRouter

from ...api.models.base import HealthResponse
from ...config import APIConfig, get_api_config

router = APIRouter()


def build_health_response(config: APIConfig) -> HealthResponse:
    """Health body naming the running service and its version."""
    return HealthResponse(
        status="healthy",
        message=f"{config.title} is running",
        version=config.version
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return build_health_response(get_api_config())
