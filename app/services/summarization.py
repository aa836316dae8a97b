"""
LLM summarization of a single video transcript.

SummarizationService builds a fixed two-message prompt (system instructions
plus title and transcript), calls the configured LLM provider with fixed
sampling parameters and extracts tags from the prose it gets back.
"""
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict

from app.models import VideoTranscript, LLMRole
from app.core.constants import SummarizationConfig
from app.core.exceptions import SummarizationError
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.core.prompts import SummarizationPrompts
from app.services.tagging import extract_tags


class SummaryOutput(BaseModel):
    """Generated summary text and the tags parsed from it."""

    summary_text: str
    tags: List[str]

    model_config = ConfigDict(frozen=True)


class SummarizationService:
    """
    Summarizes video transcripts with an LLM provider.

    Temperature and max tokens are constants from SummarizationConfig and
    cannot be changed per request.

    Attributes:
        MAX_TRANSCRIPT_CHARS: Transcripts longer than this are truncated before prompting.
    """

    MAX_TRANSCRIPT_CHARS = SummarizationConfig.MAX_TRANSCRIPT_CHARS

    def __init__(self, llm_provider: Optional[LLMProvider], missing_credentials: Optional[str] = None):
        """
        Initialize the summarization service.

        Args:
            llm_provider: LLM provider for text generation. None when the
                selected provider has no credentials configured.
            missing_credentials: Message reported when ``llm_provider`` is None.
        """
        self.llm_provider = llm_provider
        self.missing_credentials = missing_credentials or "LLM API key not configured"

    def build_messages(self, transcript: str, video: VideoTranscript) -> list[LLMMessage]:
        """Build the system and user messages for one video."""
        if len(transcript) > self.MAX_TRANSCRIPT_CHARS:
            logger.warning(f"Truncating transcript for video {video.video_id}")
            transcript = transcript[:self.MAX_TRANSCRIPT_CHARS] + "..."

        return [
            LLMMessage(
                role=LLMRole.SYSTEM,
                content=SummarizationPrompts.SYSTEM_INSTRUCTIONS,
            ),
            LLMMessage(
                role=LLMRole.USER,
                content=SummarizationPrompts.USER_TEMPLATE.format(
                    title=video.title or "Untitled",
                    transcript=transcript,
                ),
            ),
        ]

    async def summarize(self, transcript: str, video: VideoTranscript) -> SummaryOutput:
        """
        Generate a summary and tags for a video transcript.

        Args:
            transcript: The transcript text to summarize.
            video: Metadata of the video the transcript belongs to.

        Returns:
            SummaryOutput with the summary prose and extracted tags.

        Raises:
            SummarizationError: If credentials are missing, the provider call
                fails or it returns no text.
        """
        if self.llm_provider is None:
            logger.error(f"Cannot summarize video {video.video_id}: {self.missing_credentials}")
            raise SummarizationError(self.missing_credentials)

        messages = self.build_messages(transcript, video)

        logger.info(
            f"Summarizing video {video.video_id} with {self.llm_provider.model_name} "
            f"({len(transcript)} chars)"
        )
        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=SummarizationConfig.TEMPERATURE,
                max_tokens=SummarizationConfig.MAX_TOKENS,
            )
        except Exception as e:
            logger.error(f"LLM provider error for video {video.video_id}: {e}")
            raise SummarizationError(f"Failed to generate summary: {e}") from e

        summary_text = (response.content or "").strip()
        if not summary_text:
            raise SummarizationError("Failed to generate summary: empty response from LLM provider")

        tags = extract_tags(summary_text)
        logger.info(f"Generated summary for {video.video_id} with tags {tags}")
        return SummaryOutput(summary_text=summary_text, tags=tags)
