"""
Groq (Llama) implementation of LLMProvider.

Groq serves an OpenAI-compatible Chat Completions API, so summary prompts are
sent as role/content messages unchanged.
"""
from typing import Optional

from groq import AsyncGroq
from loguru import logger

from app.core.providers.llm_provider import LLMProvider, LLMMessage, LLMResponse


class GroqProvider(LLMProvider):
    """
    Groq implementation of LLMProvider.

    Selected with ``SUMMARY_LLM_PROVIDER=groq``.
    """

    def __init__(self, api_key: str, model_name: str = "llama-3.3-70b-versatile"):
        """
        Initialize the Groq provider.

        Args:
            api_key: Groq API key.
            model_name: Model to use (e.g., "llama-3.3-70b-versatile").
        """
        self.client = AsyncGroq(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate a summary completion using Groq."""
        groq_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        logger.debug(f"Sending summary request to Groq ({self.model_name})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=groq_messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        choice = response.choices[0]
        if choice.finish_reason == "length":
            logger.warning(f"Groq summary hit the {max_tokens} token limit and was cut off")

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.debug(f"Groq token usage: {usage}")

        return LLMResponse(
            content=choice.message.content or "",
            model=self.model_name,
            usage=usage,
        )
