from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

# --- Internal Parsing Models (yt-dlp) ---

class YtDlpVideoInfo(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[float] = None
    description: Optional[str] = None
    channel: Optional[str] = None
    uploader: Optional[str] = None
    webpage_url: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class TranscriptSegment(BaseModel):
    text: str
    start: float
    duration: float

    model_config = ConfigDict(frozen=True)

class VideoTranscript(BaseModel):
    """Transcript and metadata of one video, as returned by the extractor."""

    video_id: str
    title: str
    transcript: str
    url: str
    thumbnail: Optional[str] = None
    duration: Optional[int] = None
    description: Optional[str] = None
    channel: Optional[str] = None
    language: Optional[str] = None
    segments: List[TranscriptSegment] = Field(default_factory=list, exclude=True)

    model_config = ConfigDict(frozen=True)

    @staticmethod
    def join_segments(segments: List[TranscriptSegment]) -> str:
        """Concatenates transcript segments into a single whitespace-normalised string."""
        text = " ".join(seg.text.strip() for seg in segments if seg.text)
        return " ".join(text.split())
