"""
YouTube service for resolving video links and extracting transcripts.
"""
import asyncio
import re
from typing import List, Optional, Tuple

from yt_dlp import YoutubeDL
from youtube_transcript_api import YouTubeTranscriptApi, CouldNotRetrieveTranscript
from youtube_transcript_api.proxies import GenericProxyConfig
from loguru import logger

from app.core.constants import YouTubeConfig
from app.core.exceptions import ExtractionError
from app.models import TranscriptSegment, VideoTranscript, YtDlpVideoInfo
from app.services.proxy import ProxyService

# watch?v=ID, &v=ID, /embed/ID, /e/ID, /v/ID, /<any>/<path>/ID and youtu.be/ID
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Return the 11-character video ID embedded in a YouTube URL.

    Pure and synchronous; used before any network call is made.

    Args:
        url: Any string, typically a URL pasted by the user.

    Returns:
        The video ID, or None when the string is not a recognised video link.
    """
    if not url:
        return None
    match = VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None


class TranscriptExtractor:
    """
    Extracts the transcript and metadata of a single YouTube video.

    This service handles:
    1. Resolving the video ID from the submitted URL (no network).
    2. Fetching the transcript with youtube-transcript-api, preferring
       manual subtitles over automatic captions.
    3. Fetching title, thumbnail, duration and description with yt-dlp.

    Transcript failures raise ExtractionError. Metadata failures only degrade
    the result to placeholder values.
    """

    def __init__(self, proxy_service: ProxyService):
        """
        Initialize the TranscriptExtractor.

        Args:
            proxy_service: Service providing optional proxy settings for transcript fetches.
        """
        self.proxy_service = proxy_service

    extract_video_id = staticmethod(extract_video_id)

    def _extract_video_info_sync(self, video_id: str) -> dict:
        """
        Synchronous helper to extract video info using yt-dlp.

        Args:
            video_id: The YouTube video ID.

        Returns:
            The raw info dict from yt-dlp.
        """
        ydl_opts = {
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
        }

        with YoutubeDL(ydl_opts) as ydl:
            return ydl.extract_info(
                YouTubeConfig.WATCH_URL.format(video_id=video_id), download=False
            )

    async def fetch_metadata(self, video_id: str) -> YtDlpVideoInfo:
        """
        Fetch video metadata, falling back to placeholders on failure.

        Args:
            video_id: The YouTube video ID.

        Returns:
            YtDlpVideoInfo parsed from the yt-dlp payload.
        """
        try:
            info_dict = await asyncio.to_thread(self._extract_video_info_sync, video_id)
            if info_dict:
                return YtDlpVideoInfo(**info_dict)
            logger.warning(f"No info returned from yt-dlp for video {video_id}")
        except Exception as e:
            logger.warning(f"Metadata lookup failed for video {video_id}, using fallback: {e}")

        return YtDlpVideoInfo(id=video_id)

    def _fetch_transcript_sync(self, video_id: str) -> Tuple[Optional[list], Optional[str]]:
        proxies = self.proxy_service.get_proxies()
        proxy_conf = None
        if proxies:
            proxy_conf = GenericProxyConfig(
                http_url=proxies.http, https_url=proxies.https
            )

        transcript_list = list(YouTubeTranscriptApi(proxy_config=proxy_conf).list(video_id))

        # Priority 1: Manual Subtitles (Any Language)
        for t in transcript_list:
            if not t.is_generated:
                logger.info(f"Video {video_id}: Using Manual transcript in '{t.language}'")
                return t.fetch(), t.language_code

        # Priority 2: Automatic Captions (Any Language)
        for t in transcript_list:
            if t.is_generated:
                logger.info(f"Video {video_id}: Using Automatic transcript in '{t.language}'")
                return t.fetch(), t.language_code

        return None, None

    async def fetch_transcript(self, video_id: str) -> Tuple[List[TranscriptSegment], Optional[str]]:
        """
        Fetch the transcript segments of a video.

        Args:
            video_id: The YouTube video ID.

        Returns:
            The transcript segments and the language code they are in.

        Raises:
            ExtractionError: If transcripts are disabled or missing, or the request fails.
        """
        try:
            raw_transcript, language = await asyncio.to_thread(
                self._fetch_transcript_sync, video_id
            )
        except CouldNotRetrieveTranscript as e:
            logger.warning(f"No transcript available for video {video_id}: {type(e).__name__}")
            raise ExtractionError(
                f"No transcript is available for video {video_id}."
            ) from e
        except Exception as e:
            logger.error(f"Error fetching transcript for {video_id}: {e}")
            raise ExtractionError(f"Failed to extract transcript: {e}") from e

        if not raw_transcript:
            raise ExtractionError(f"No transcript is available for video {video_id}.")

        segments = [
            TranscriptSegment(text=item.text, start=item.start, duration=item.duration)
            for item in raw_transcript
        ]
        return segments, language

    async def extract(self, url: str) -> VideoTranscript:
        """
        Extract transcript and metadata for the video behind ``url``.

        Args:
            url: The YouTube video URL as submitted by the user.

        Returns:
            VideoTranscript with the joined transcript text and metadata.

        Raises:
            ExtractionError: If the URL is not a video link or no transcript can be fetched.
        """
        video_id = self.extract_video_id(url)
        if not video_id:
            logger.warning(f"Rejected URL without a video ID: {url}")
            raise ExtractionError("Invalid YouTube URL", status_code=422)

        segments, language = await self.fetch_transcript(video_id)
        transcript = VideoTranscript.join_segments(segments)
        if not transcript:
            raise ExtractionError(f"Transcript for video {video_id} is empty.")

        info = await self.fetch_metadata(video_id)

        logger.info(
            f"Extracted transcript for {video_id}: {len(segments)} segments, {len(transcript)} chars"
        )
        return VideoTranscript(
            video_id=video_id,
            title=info.title or f"Video: {video_id}",
            transcript=transcript,
            url=url,
            thumbnail=info.thumbnail or YouTubeConfig.THUMBNAIL_URL.format(video_id=video_id),
            duration=int(info.duration) if info.duration is not None else None,
            description=info.description,
            channel=info.channel or info.uploader,
            language=language,
            segments=segments,
        )
