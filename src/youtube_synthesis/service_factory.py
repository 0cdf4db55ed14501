"""Factory for creating and configuring services."""

from typing import Optional

import httpx

from .core import LLMConfig, LLMManager, TranscriptFetcher, YouTubeClient
from .core.config import Config, config as default_config
from .services import AnalysisService, SynthesisService
from .utils.logging import get_logger
from .workflows import ProjectWorkflow

logger = get_logger("service_factory")


class ServiceFactory:
    """Creates process-wide clients once and shares them across requests."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or default_config
        self._http_client = None
        self._youtube_client = None
        self._transcript_fetcher = None
        self._llm_manager = None
        self._analysis_service = None
        self._synthesis_service = None
        self._workflow = None

        logger.info("Initialized ServiceFactory")

    def get_http_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._http_client is None:
            network = self.config.network
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(network.http_timeout_total, connect=network.http_timeout_connect),
                headers={"User-Agent": network.user_agent}
            )
        return self._http_client

    def get_youtube_client(self) -> YouTubeClient:
        """Get or create YouTube client."""
        if self._youtube_client is None:
            self._youtube_client = YouTubeClient(self.get_http_client(), self.config.youtube)
        return self._youtube_client

    def get_transcript_fetcher(self) -> TranscriptFetcher:
        """Get or create transcript fetcher."""
        if self._transcript_fetcher is None:
            self._transcript_fetcher = TranscriptFetcher(languages=self.config.youtube.transcript_languages)
        return self._transcript_fetcher

    def get_llm_manager(self) -> LLMManager:
        """Get or create LLM manager."""
        if self._llm_manager is None:
            self._llm_manager = LLMManager(LLMConfig.from_settings(self.config.llm))
        return self._llm_manager

    def get_analysis_service(self) -> AnalysisService:
        """Get or create analysis service."""
        if self._analysis_service is None:
            self._analysis_service = AnalysisService(self.get_llm_manager())
        return self._analysis_service

    def get_synthesis_service(self) -> SynthesisService:
        """Get or create synthesis service."""
        if self._synthesis_service is None:
            self._synthesis_service = SynthesisService(self.get_llm_manager())
        return self._synthesis_service

    def get_project_workflow(self) -> ProjectWorkflow:
        """Get or create project workflow."""
        if self._workflow is None:
            self._workflow = ProjectWorkflow(
                self.get_youtube_client(),
                self.get_transcript_fetcher(),
                self.get_analysis_service(),
                self.get_synthesis_service()
            )
        return self._workflow

    async def cleanup(self):
        """Close shared network resources."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._youtube_client = None
            self._workflow = None

        logger.info("ServiceFactory cleanup completed")


_service_factory: Optional[ServiceFactory] = None


def get_service_factory() -> ServiceFactory:
    """Get the process-wide service factory."""
    global _service_factory
    if _service_factory is None:
        _service_factory = ServiceFactory()
    return _service_factory


async def reset_service_factory() -> None:
    """Clean up and forget the process-wide service factory."""
    global _service_factory
    if _service_factory is not None:
        await _service_factory.cleanup()
        _service_factory = None
