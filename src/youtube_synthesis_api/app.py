"""FastAPI application for video analysis and project synthesis."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from youtube_synthesis.core.config import config as core_config
from youtube_synthesis.service_factory import reset_service_factory

from .api.models.base import HealthResponse
from .api.routers import health, project, video
from .config import get_api_config
from .exceptions import APIError, InvalidURLError, ProjectProcessingError, ProjectSaveError
from .middleware import setup_middleware

logging.basicConfig(
    level=core_config.logging.level.upper(),
    format=core_config.logging.format,
    datefmt=core_config.logging.date_format
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Error returned when an endpoint's request body cannot be read
BODY_ERRORS = {
    f"{API_PREFIX}/process-video": InvalidURLError,
    f"{API_PREFIX}/process-project": ProjectProcessingError,
    f"{API_PREFIX}/save-project": ProjectSaveError,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report configuration on startup and close shared clients on shutdown."""
    config = get_api_config()
    logger.info(f"{config.title} {config.version} starting ({config.environment}, debug={config.debug})")
    for name in core_config.missing_credentials():
        logger.warning(f"{name} is not set; requests that need it will fail")

    yield

    logger.info(f"{config.title} stopping")
    await reset_service_factory()


def create_app() -> FastAPI:
    """
    Build the application.

    Returns:
        FastAPI app with the video and project endpoints mounted under /api
    """
    config = get_api_config()

    app = FastAPI(
        title=config.title,
        description=config.description,
        version=config.version,
        debug=config.debug,
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None
    )
    setup_middleware(app)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        error_class = BODY_ERRORS.get(request.url.path)
        if error_class is None:
            return await request_validation_exception_handler(request, exc)

        error = error_class()
        logger.warning(f"{request.method} {request.url.path} unreadable body: {exc.errors()}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def root_health():
        """Liveness probe outside the API prefix."""
        return health.build_health_response(config)

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": config.title,
            "version": config.version,
            "endpoints": [
                f"{API_PREFIX}/process-video",
                f"{API_PREFIX}/process-project",
                f"{API_PREFIX}/save-project",
            ],
        }

    app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])
    app.include_router(video.router, prefix=API_PREFIX, tags=["Videos"])
    app.include_router(project.router, prefix=API_PREFIX, tags=["Projects"])

    logger.debug(f"Application created (CORS origins: {', '.join(config.cors_origins)})")
    return app


app = create_app()


def main():
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    config = get_api_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
