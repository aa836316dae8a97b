"""
API endpoints for transcript extraction, video summaries and summary management.
"""
from fastapi import APIRouter, Request, Depends, Query
from typing import List
from loguru import logger
import time
import uuid

from app.models.api import (
    VideoUrlRequest,
    GenerateSummaryRequest,
    GeneratedSummary,
    SummaryRecord,
    VideoIdResponse,
)
from app.models.youtube import VideoTranscript
from app.services.notes import YouTubeNoteService
from app.api.dependencies import get_note_service
from app.api.auth import current_active_user
from app.models.sql import User
from app.core.limiter import limiter
from app.core.constants import PaginationConfig, RateLimitConfig


router = APIRouter()


@router.get("/videos/id", response_model=VideoIdResponse)
async def get_video_id(url: str = Query(..., min_length=1, max_length=2048)):
    """
    Resolves the YouTube video ID embedded in a URL without any network call.

    Returns:
        VideoIdResponse: The URL and its video ID (null when not a video link).
    """
    return VideoIdResponse(url=url, video_id=YouTubeNoteService.extract_video_id(url))


@router.post("/transcripts", response_model=VideoTranscript)
@limiter.limit(RateLimitConfig.EXTRACT)
async def extract_transcript(
    request: Request,
    payload: VideoUrlRequest,
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Extracts the transcript and metadata of a YouTube video.

    Rate limit: 30 requests per minute.

    Args:
        request: FastAPI request object (required for rate limiting).
        payload: The request body containing the video URL.
        note_service: The service handling the business logic.
        user: The authenticated user.

    Returns:
        VideoTranscript: Transcript text and video metadata.
    """
    logger.info(f"Transcript request for URL: {payload.url} from user {user.id}")
    return await note_service.extract_transcript(payload.url)


@router.post("/summaries/generate", response_model=GeneratedSummary, status_code=201)
@limiter.limit(RateLimitConfig.SUMMARIZE)
async def generate_summary(
    request: Request,
    payload: GenerateSummaryRequest,
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Summarizes an already extracted transcript and saves the result.

    Rate limit: 10 requests per minute.

    Returns:
        GeneratedSummary: The stored record with summary text and tags.
    """
    logger.info(f"Summary request for video {payload.video.video_id} from user {user.id}")

    start_time = time.perf_counter()
    result = await note_service.generate_summary(payload.transcript, payload.video, user.id)
    duration = time.perf_counter() - start_time
    logger.info(f"Summary generated in {duration:.2f}s")
    return result


@router.post("/summaries", response_model=GeneratedSummary, status_code=201)
@limiter.limit(RateLimitConfig.SUMMARIZE)
async def summarize_video(
    request: Request,
    payload: VideoUrlRequest,
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Extracts, summarizes and saves a YouTube video in one call.

    Rate limit: 10 requests per minute.

    Args:
        request: FastAPI request object (required for rate limiting).
        payload: The request body containing the video URL.
        note_service: The service handling the business logic.
        user: The authenticated user.

    Returns:
        GeneratedSummary: The stored record with summary text and tags.
    """
    logger.info(f"Incoming summary pipeline request for URL: {payload.url} from user {user.id}")

    start_time = time.perf_counter()
    result = await note_service.summarize_video(payload.url, user.id)
    duration = time.perf_counter() - start_time
    logger.info(f"Summary pipeline completed in {duration:.2f}s")
    return result


@router.get("/summaries", response_model=List[SummaryRecord])
async def list_summaries(
    limit: int = Query(
        default=PaginationConfig.DEFAULT_LIMIT,
        ge=1,
        le=PaginationConfig.MAX_LIMIT,
        description=f"Max results (1-{PaginationConfig.MAX_LIMIT})",
    ),
    offset: int = Query(default=0, ge=0, description="Pagination offset"),
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Retrieves the saved summaries of the authenticated user, newest first.
    """
    logger.info(f"Fetching summaries for user {user.id} (limit={limit}, offset={offset})")
    return await note_service.list_summaries(user.id, limit, offset)


@router.get("/summaries/{summary_id}", response_model=SummaryRecord)
async def get_summary(
    summary_id: uuid.UUID,
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Retrieves one saved summary owned by the authenticated user.
    """
    logger.info(f"Fetching summary {summary_id} for user {user.id}")
    return await note_service.get_summary(summary_id, user.id)


@router.delete("/summaries/{summary_id}", status_code=204)
async def delete_summary(
    summary_id: uuid.UUID,
    note_service: YouTubeNoteService = Depends(get_note_service),
    user: User = Depends(current_active_user),
):
    """
    Deletes a saved summary owned by the authenticated user.
    """
    logger.info(f"User {user.id} deleting summary {summary_id}")
    await note_service.delete_summary(summary_id, user.id)
    return
