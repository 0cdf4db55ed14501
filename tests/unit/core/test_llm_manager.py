"""Unit tests for the LLM manager."""

from unittest.mock import patch

import pytest

from youtube_synthesis.core.llm_manager import JSON_OBJECT_FORMAT, LLMConfig, LLMManager

from tests.mocks.mock_services import MockChatModel


class TestLLMManager:

    @pytest.mark.asyncio
    async def test_complete_sends_system_and_user_messages(self):
        model = MockChatModel(["plain reply"])
        manager = LLMManager(LLMConfig(model="gpt-4o-mini"), llm=model)

        content = await manager.complete("be brief", "transcript text")

        assert content == "plain reply"
        assert model.calls == [{"system": "be brief", "user": "transcript text", "bound": {}}]

    @pytest.mark.asyncio
    async def test_complete_json_mode_binds_response_format(self):
        model = MockChatModel(['{"ok": true}'])
        manager = LLMManager(LLMConfig(model="gpt-4o-mini"), llm=model)

        await manager.complete("system", "user", json_mode=True)

        assert model.calls[0]["bound"] == {"response_format": JSON_OBJECT_FORMAT}

    @patch("youtube_synthesis.core.llm_manager.ChatOpenAI")
    def test_get_llm_creates_model_once(self, mock_chat_openai):
        manager = LLMManager(LLMConfig(model="gpt-4o-mini", temperature=None, timeout=30, api_key="sk-test"))

        first = manager.get_llm()
        second = manager.get_llm()

        assert first is second
        mock_chat_openai.assert_called_once_with(model="gpt-4o-mini", timeout=30, api_key="sk-test")

    @patch("youtube_synthesis.core.llm_manager.ChatOpenAI")
    def test_get_llm_passes_temperature(self, mock_chat_openai):
        manager = LLMManager(LLMConfig(model="gpt-4o", temperature=0.3, timeout=60, api_key=None))

        manager.get_llm()

        mock_chat_openai.assert_called_once_with(model="gpt-4o", timeout=60, temperature=0.3)
