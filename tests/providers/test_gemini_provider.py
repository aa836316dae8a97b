"""
Tests for the Gemini provider.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.llm_provider import LLMMessage
from app.models import LLMRole


class BlockedResponse:
    """Mimics a Gemini response whose candidate was stopped by safety filters."""

    usage_metadata = None
    prompt_feedback = "block_reason: SAFETY"

    @property
    def text(self):
        raise ValueError("The response.text quick accessor requires a valid Part")


@pytest.fixture
def mock_genai():
    with patch("app.core.providers.gemini_provider.genai") as genai:
        genai.GenerativeModel.return_value.generate_content_async = AsyncMock(
            return_value=SimpleNamespace(
                text="Summary\nTags: go",
                usage_metadata=SimpleNamespace(
                    prompt_token_count=100,
                    candidates_token_count=40,
                    total_token_count=140,
                ),
            )
        )
        yield genai


@pytest.fixture
def provider(mock_genai):
    return GeminiProvider(api_key="test-key", model_name="gemini-2.5-flash")


def test_init_configures_client(provider, mock_genai):
    mock_genai.configure.assert_called_once_with(api_key="test-key")
    mock_genai.GenerativeModel.assert_called_once_with("gemini-2.5-flash")


@pytest.mark.asyncio
async def test_generate_text_flattens_messages(provider, mock_genai):
    messages = [
        LLMMessage(role=LLMRole.SYSTEM, content="You summarize videos."),
        LLMMessage(role=LLMRole.USER, content="Video Title: T"),
    ]

    response = await provider.generate_text(messages, temperature=0.7, max_tokens=1000)

    mock_genai.GenerationConfig.assert_called_once_with(temperature=0.7, max_output_tokens=1000)
    generate = mock_genai.GenerativeModel.return_value.generate_content_async
    args, kwargs = generate.call_args
    assert args[0] == "System Instructions: You summarize videos.\n\nUser: Video Title: T\n"
    assert kwargs["generation_config"] is mock_genai.GenerationConfig.return_value

    assert response.content == "Summary\nTags: go"
    assert response.model == "gemini-2.5-flash"
    assert response.usage == {"prompt_tokens": 100, "completion_tokens": 40, "total_tokens": 140}


@pytest.mark.asyncio
async def test_generate_text_blocked_response_returns_empty_content(provider, mock_genai):
    mock_genai.GenerativeModel.return_value.generate_content_async.return_value = BlockedResponse()

    response = await provider.generate_text([LLMMessage(role=LLMRole.USER, content="hi")])

    assert response.content == ""
    assert response.usage is None
