"""FastAPI dependencies for service injection."""

from fastapi import Depends

from youtube_synthesis.service_factory import ServiceFactory
from youtube_synthesis.service_factory import get_service_factory as _get_service_factory
from youtube_synthesis.workflows import ProjectWorkflow


def get_service_factory() -> ServiceFactory:
    """
    Get service factory instance.

    Returns:
        The process-wide ServiceFactory
    """
    return _get_service_factory()


def get_project_workflow(
    service_factory: ServiceFactory = Depends(get_service_factory)
) -> ProjectWorkflow:
    """
    Get ProjectWorkflow instance.

    Args:
        service_factory: ServiceFactory instance

    Returns:
        ProjectWorkflow instance
    """
    return service_factory.get_project_workflow()
