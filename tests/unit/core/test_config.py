"""Unit tests for configuration and the service factory."""

import httpx
import pytest

from youtube_synthesis.core.config import Config, LLMConfig, YouTubeConfig
from youtube_synthesis.service_factory import ServiceFactory, get_service_factory, reset_service_factory
from youtube_synthesis.workflows import ProjectWorkflow


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("LLM_DEFAULT_MODEL", "LLM_DEFAULT_TEMPERATURE", "TRANSCRIPT_LANGUAGES"):
            monkeypatch.delenv(name, raising=False)

        config = Config()

        assert config.llm.default_model == "gpt-4o-mini"
        assert config.llm.default_temperature is None
        assert config.youtube.transcript_languages == ["en"]
        assert config.validate() == []

    def test_transcript_languages_from_env(self, monkeypatch):
        monkeypatch.setenv("TRANSCRIPT_LANGUAGES", "de, en,")

        assert YouTubeConfig().transcript_languages == ["de", "en"]

    def test_invalid_temperature(self, monkeypatch):
        monkeypatch.setenv("LLM_DEFAULT_TEMPERATURE", "3.5")

        assert "LLM_DEFAULT_TEMPERATURE must be between 0.0 and 2.0" in Config().validate()

    def test_missing_credentials(self):
        config = Config(youtube=YouTubeConfig(api_key=None), llm=LLMConfig(api_key=None))

        assert config.missing_credentials() == ["YOUTUBE_API_KEY", "OPENAI_API_KEY"]


class TestServiceFactory:

    @pytest.mark.asyncio
    async def test_services_are_shared(self):
        factory = ServiceFactory(Config())

        workflow = factory.get_project_workflow()

        assert isinstance(workflow, ProjectWorkflow)
        assert factory.get_project_workflow() is workflow
        assert workflow.analysis_service.llm_manager is workflow.synthesis_service.llm_manager
        assert isinstance(factory.get_http_client(), httpx.AsyncClient)

        await factory.cleanup()
        assert factory.get_http_client().is_closed is False

    @pytest.mark.asyncio
    async def test_llm_settings_follow_factory_config(self):
        factory = ServiceFactory(Config(llm=LLMConfig(default_model="gpt-4o", api_key="sk-factory")))

        manager = factory.get_llm_manager()

        assert manager.config.model == "gpt-4o"
        assert manager.config.api_key == "sk-factory"

    @pytest.mark.asyncio
    async def test_global_factory_reset(self):
        first = get_service_factory()
        assert get_service_factory() is first

        await reset_service_factory()

        assert get_service_factory() is not first
        await reset_service_factory()
