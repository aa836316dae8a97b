"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. The LLM provider is selected based on config.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db_session

# Repositories
from app.repositories.summary import SummaryRepository

# Provider interface and type enum
from app.core.providers.llm_provider import LLMProvider
from app.models.enums import LLMProviderType

# Concrete providers
from app.core.providers.openai_provider import OpenAIProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.gemini_provider import GeminiProvider

# Services
from app.services.proxy import ProxyService
from app.services.youtube import TranscriptExtractor
from app.services.summarization import SummarizationService
from app.services.notes import YouTubeNoteService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_summary_llm_provider() -> Optional[LLMProvider]:
    """
    Get LLM provider for summarization.

    Default: OpenAI (configured in settings.SUMMARY_LLM_PROVIDER).
    Returns None when the selected provider has no API key, so the
    summarization stage can report missing credentials per request.
    """
    provider_type = settings.SUMMARY_LLM_PROVIDER

    if provider_type == LLMProviderType.OPENAI:
        if not settings.OPENAI_API_KEY:
            return None
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL_NAME,
            base_url=settings.OPENAI_BASE_URL,
        )
    elif provider_type == LLMProviderType.GROQ:
        if not settings.GROQ_API_KEY:
            return None
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GEMINI:
        if not settings.GEMINI_API_KEY:
            return None
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_proxy_service() -> ProxyService:
    """Get proxy service for YouTube transcript requests."""
    return ProxyService(
        host=settings.DATAIMPULSE_HOST,
        port=settings.DATAIMPULSE_PORT,
        login=settings.DATAIMPULSE_LOGIN,
        password=settings.DATAIMPULSE_PASSWORD,
    )


def get_summary_repository(
    db: AsyncSession = Depends(get_db_session),
) -> SummaryRepository:
    """Get summary repository for record persistence."""
    return SummaryRepository(db)


def get_transcript_extractor(
    proxy_service: ProxyService = Depends(get_proxy_service),
) -> TranscriptExtractor:
    """Get transcript extractor for YouTube videos."""
    return TranscriptExtractor(proxy_service=proxy_service)


def get_summarization_service(
    llm_provider: Optional[LLMProvider] = Depends(get_summary_llm_provider),
) -> SummarizationService:
    """Get summarization service for video summaries."""
    if llm_provider is None:
        provider_name = settings.SUMMARY_LLM_PROVIDER.value
        logger.warning(f"No API key configured for summary provider '{provider_name}'")
        return SummarizationService(
            llm_provider=None,
            missing_credentials=f"{provider_name} API key not configured",
        )
    return SummarizationService(llm_provider=llm_provider)


def get_note_service(
    extractor: TranscriptExtractor = Depends(get_transcript_extractor),
    summarization_service: SummarizationService = Depends(get_summarization_service),
    summary_repository: SummaryRepository = Depends(get_summary_repository),
) -> YouTubeNoteService:
    """
    Get the YouTube note service.

    Wires together:
    - TranscriptExtractor for transcript and metadata extraction
    - SummarizationService for LLM summaries and tags
    - SummaryRepository for persistence
    """
    return YouTubeNoteService(
        extractor=extractor,
        summarization_service=summarization_service,
        summary_repository=summary_repository,
    )
