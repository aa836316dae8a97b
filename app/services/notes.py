"""
YouTube note service: the facade over the summary pipeline.

A pipeline run is strictly sequential:

1. TranscriptExtractor resolves the URL and fetches transcript + metadata.
2. SummarizationService asks the LLM for a summary and parses tags.
3. SummaryRepository inserts one SummaryModel row.

Each stage raises its own typed error and stops the run, so a record is only
written when both earlier stages succeeded. Nothing is retried and repeated
requests for the same video are not de-duplicated.
"""
from typing import List, Optional
import uuid

from loguru import logger

from app.core.exceptions import PersistenceError
from app.models import GeneratedSummary, SummaryRecord, VideoTranscript
from app.models.sql import SummaryModel
from app.repositories.summary import SummaryRepository
from app.services.summarization import SummarizationService
from app.services.youtube import TranscriptExtractor, extract_video_id


class YouTubeNoteService:
    """
    Orchestrates transcript extraction, summarization and persistence.

    The caller supplies the user identity explicitly on every call; the
    service keeps no state between invocations.
    """

    def __init__(
        self,
        extractor: TranscriptExtractor,
        summarization_service: SummarizationService,
        summary_repository: SummaryRepository,
    ):
        """
        Initialize the YouTubeNoteService.

        Args:
            extractor: Service fetching transcripts and metadata.
            summarization_service: Service generating summaries and tags.
            summary_repository: Repository persisting summary records.
        """
        self.extractor = extractor
        self.summarization_service = summarization_service
        self.summary_repository = summary_repository

    @staticmethod
    def extract_video_id(url: str) -> Optional[str]:
        """Return the video ID of a YouTube URL, or None. Makes no network call."""
        return extract_video_id(url)

    async def extract_transcript(self, url: str) -> VideoTranscript:
        """
        Extract transcript and metadata of a video.

        Raises:
            ExtractionError: If the URL is invalid or the transcript is unavailable.
        """
        return await self.extractor.extract(url)

    async def generate_summary(
        self,
        transcript: str,
        video: VideoTranscript,
        user_id: uuid.UUID,
    ) -> GeneratedSummary:
        """
        Summarize a transcript and save the result for a user.

        Args:
            transcript: The transcript text to summarize.
            video: Metadata of the video, as returned by extract_transcript.
            user_id: The owner of the new record.

        Returns:
            GeneratedSummary with the stored record, summary text and tags.

        Raises:
            SummarizationError: If the LLM call fails. Nothing is written.
            PersistenceError: If the record cannot be saved.
        """
        output = await self.summarization_service.summarize(transcript, video)

        summary = SummaryModel(
            id=uuid.uuid4(),
            user_id=user_id,
            video_id=video.video_id,
            video_title=video.title,
            video_url=video.url,
            video_thumbnail=video.thumbnail,
            transcript=transcript,
            summary=output.summary_text,
            tags=list(output.tags),
            duration=video.duration,
        )
        summary = await self.summary_repository.create_summary(summary)
        logger.info(f"Saved summary {summary.id} of video {video.video_id} for user {user_id}")

        return GeneratedSummary(
            record=SummaryRecord.model_validate(summary),
            summary_text=output.summary_text,
            tags=output.tags,
        )

    async def summarize_video(self, url: str, user_id: uuid.UUID) -> GeneratedSummary:
        """
        Run the full pipeline for a video URL.

        Raises:
            ExtractionError, SummarizationError, PersistenceError: From the failing stage.
        """
        logger.info(f"Starting summary pipeline for user {user_id} with URL: {url}")
        video = await self.extract_transcript(url)
        return await self.generate_summary(video.transcript, video, user_id)

    async def list_summaries(
        self, user_id: uuid.UUID, limit: int = 20, offset: int = 0
    ) -> List[SummaryRecord]:
        """Return the user's saved summaries, newest first."""
        summaries = await self.summary_repository.get_user_summaries(user_id, limit, offset)
        return [SummaryRecord.model_validate(s) for s in summaries]

    async def get_summary(self, summary_id: uuid.UUID, user_id: uuid.UUID) -> SummaryRecord:
        """
        Return one saved summary owned by the user.

        Raises:
            PersistenceError: If the summary does not exist for this user (404).
        """
        summary = await self.summary_repository.get_summary(summary_id, user_id)
        if summary is None:
            raise PersistenceError(
                f"Summary with id '{summary_id}' was not found.", status_code=404
            )
        return SummaryRecord.model_validate(summary)

    async def delete_summary(self, summary_id: uuid.UUID, user_id: uuid.UUID) -> None:
        """
        Delete a saved summary owned by the user.

        Raises:
            PersistenceError: If the summary does not exist for this user (404)
                or cannot be deleted.
        """
        await self.summary_repository.delete_summary(summary_id, user_id)
        logger.info(f"Deleted summary {summary_id} of user {user_id}")
