"""Unit tests for single-video analysis."""

import json

import pytest

from youtube_synthesis.services import ANALYSIS_PROMPT, AnalysisService

from tests.mocks.mock_services import SAMPLE_ANALYSIS


class TestAnalysisService:

    @pytest.mark.asyncio
    async def test_analyze_transcript(self, chat_model, llm_manager):
        chat_model.responses.append(SAMPLE_ANALYSIS)
        service = AnalysisService(llm_manager)

        analysis = await service.analyze_transcript("full transcript text")

        assert analysis == SAMPLE_ANALYSIS
        assert chat_model.calls == [{
            "system": ANALYSIS_PROMPT,
            "user": "full transcript text",
            "bound": {},
        }]

    @pytest.mark.asyncio
    async def test_analysis_shape_is_not_validated(self, chat_model, llm_manager):
        chat_model.responses.append('{"summary": "anything goes", "topics": 3}')

        analysis = await AnalysisService(llm_manager).analyze_transcript("text")

        assert analysis == {"summary": "anything goes", "topics": 3}

    @pytest.mark.asyncio
    async def test_non_json_response_raises(self, chat_model, llm_manager):
        chat_model.responses.append("Here is the analysis you asked for")

        with pytest.raises(json.JSONDecodeError):
            await AnalysisService(llm_manager).analyze_transcript("text")

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, chat_model, llm_manager):
        chat_model.responses.append(RuntimeError("rate limited"))

        with pytest.raises(RuntimeError, match="rate limited"):
            await AnalysisService(llm_manager).analyze_transcript("text")
