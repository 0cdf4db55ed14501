"""Pytest configuration and fixtures for the YouTube synthesis tests."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Make the project root and src/ importable without an installed package
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
for path in (ROOT_DIR, os.path.join(ROOT_DIR, 'src')):
    if path not in sys.path:
        sys.path.insert(0, path)

# Set test environment variables before importing the app
os.environ["YOUTUBE_API_KEY"] = "test-youtube-key"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from youtube_synthesis.core.config import YouTubeConfig
from youtube_synthesis.core.llm_manager import LLMConfig, LLMManager
from youtube_synthesis.core.transcript_fetcher import TranscriptFetcher
from youtube_synthesis.core.youtube_client import YouTubeClient
from youtube_synthesis.services import AnalysisService, SynthesisService
from youtube_synthesis.workflows import ProjectWorkflow
from youtube_synthesis_api.app import create_app
from youtube_synthesis_api.dependencies import get_project_workflow

from tests.mocks.mock_services import MockChatModel, MockTranscriptApi, MockYouTubeDataApi

VIDEO_IDS = ["dQw4w9WgXcQ", "9bZkp7q5g9A", "kJQP7kiw5Fk"]


@pytest.fixture
def video_ids():
    """Valid-looking video IDs."""
    return list(VIDEO_IDS)


@pytest.fixture
def youtube_api(video_ids):
    """Mock Data API with one entry per test video."""
    api = MockYouTubeDataApi()
    for index, video_id in enumerate(video_ids):
        api.add_video(video_id, title=f"Video {index + 1}")
    return api


@pytest.fixture
def youtube_config():
    """Data API settings with a test key."""
    return YouTubeConfig(api_key="test-youtube-key", transcript_languages=["en"])


@pytest.fixture
def youtube_client(youtube_api, youtube_config):
    """YouTubeClient talking to the mock Data API."""
    return YouTubeClient(youtube_api.client(), youtube_config)


@pytest.fixture
def transcript_api(video_ids):
    """Mock transcript API with a short transcript per test video."""
    return MockTranscriptApi({
        video_id: [f"transcript {index + 1}", "second line"]
        for index, video_id in enumerate(video_ids)
    })


@pytest.fixture
def transcript_fetcher(transcript_api):
    """TranscriptFetcher backed by the mock transcript API."""
    return TranscriptFetcher(api=transcript_api, languages=["en"])


@pytest.fixture
def chat_model():
    """Chat model with no queued responses."""
    return MockChatModel()


@pytest.fixture
def llm_manager(chat_model):
    """LLMManager wrapping the mock chat model."""
    return LLMManager(LLMConfig(model="gpt-4o-mini", api_key="test-openai-key"), llm=chat_model)


@pytest.fixture
def workflow(youtube_client, transcript_fetcher, llm_manager):
    """ProjectWorkflow wired to mock collaborators."""
    return ProjectWorkflow(
        youtube_client,
        transcript_fetcher,
        AnalysisService(llm_manager),
        SynthesisService(llm_manager)
    )


@pytest.fixture
def app(workflow):
    """FastAPI application using the mocked workflow."""
    application = create_app()
    application.dependency_overrides[get_project_workflow] = lambda: workflow
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
