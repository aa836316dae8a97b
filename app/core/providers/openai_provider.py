"""
OpenAI implementation of LLMProvider.

Talks to the Chat Completions endpoint (or any OpenAI-compatible base URL)
through the official async SDK.
"""
from typing import Optional

from openai import AsyncOpenAI
from loguru import logger

from app.core.providers.llm_provider import LLMProvider, LLMMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """
    OpenAI implementation of LLMProvider.
    
    Example:
        provider = OpenAIProvider(
            api_key="your-api-key",
            model_name="gpt-4o-mini",
        )
        response = await provider.generate_text(messages)
    """
    
    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
    ):
        """
        Initialize the OpenAI provider.
        
        Args:
            api_key: OpenAI API key.
            model_name: Model to use (e.g., "gpt-4o-mini").
            base_url: Optional OpenAI-compatible endpoint.
        """
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model_name = model_name
    
    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate text completion using OpenAI Chat Completions."""
        openai_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]
        
        logger.debug(f"Sending request to OpenAI ({self.model_name})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=openai_messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        
        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.debug(f"OpenAI token usage: {usage}")
        
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
