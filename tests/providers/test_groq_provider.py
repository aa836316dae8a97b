"""
Tests for the Groq chat-completion provider.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.providers.groq_provider import GroqProvider
from app.core.providers.llm_provider import LLMMessage
from app.models import LLMRole


def _completion(content, finish_reason="stop", usage=True):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=SimpleNamespace(prompt_tokens=90, completion_tokens=60, total_tokens=150) if usage else None,
    )


@pytest.fixture
def provider():
    provider = GroqProvider(api_key="test-key", model_name="llama-3.3-70b-versatile")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock(return_value=_completion("Summary"))
    return provider


@pytest.mark.asyncio
async def test_generate_text_request_body(provider):
    messages = [
        LLMMessage(role=LLMRole.SYSTEM, content="You summarize videos."),
        LLMMessage(role=LLMRole.USER, content="Video Title: T"),
    ]

    response = await provider.generate_text(messages, temperature=0.7, max_tokens=1000)

    provider.client.chat.completions.create.assert_awaited_once_with(
        model="llama-3.3-70b-versatile",
        messages=[
            {"role": "system", "content": "You summarize videos."},
            {"role": "user", "content": "Video Title: T"},
        ],
        temperature=0.7,
        max_tokens=1000,
    )
    assert response.content == "Summary"
    assert response.model == "llama-3.3-70b-versatile"
    assert response.usage == {"prompt_tokens": 90, "completion_tokens": 60, "total_tokens": 150}


@pytest.mark.asyncio
async def test_generate_text_none_content_and_no_usage(provider):
    provider.client.chat.completions.create.return_value = _completion(None, usage=False)

    response = await provider.generate_text([LLMMessage(role=LLMRole.USER, content="hi")])

    assert response.content == ""
    assert response.usage is None


@pytest.mark.asyncio
async def test_generate_text_truncated_completion_is_returned(provider):
    provider.client.chat.completions.create.return_value = _completion(
        "Partial summary", finish_reason="length"
    )

    response = await provider.generate_text(
        [LLMMessage(role=LLMRole.USER, content="hi")], max_tokens=1000
    )

    assert response.content == "Partial summary"
