"""
Application-wide constants and configuration limits.

Grouped into static classes for namespace management and discoverability.
"""

class PaginationConfig:
    """Configuration for API pagination."""
    DEFAULT_LIMIT = 20
    MAX_LIMIT = 100


class RateLimitConfig:
    """Rate limiting thresholds (requests per minute)."""
    SUMMARIZE = "10/minute"
    EXTRACT = "30/minute"


class YouTubeConfig:
    """Configuration for YouTube service."""
    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"


class SummarizationConfig:
    """Fixed sampling parameters for video summaries. Not user-tunable."""
    TEMPERATURE = 0.7
    MAX_TOKENS = 1000

    # Approx. 100k tokens (assuming ~4 chars/token)
    MAX_TRANSCRIPT_CHARS = 400_000

    DEFAULT_TAGS = ("youtube", "summary")
