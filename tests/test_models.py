"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from app.models import TranscriptSegment, VideoTranscript, VideoUrlRequest, YtDlpVideoInfo


def test_join_segments_normalises_whitespace():
    """Test that segments are concatenated into one clean string."""
    segments = [
        TranscriptSegment(text=" Hello ", start=0.0, duration=1.0),
        TranscriptSegment(text="", start=1.0, duration=1.0),
        TranscriptSegment(text="big\n world", start=2.0, duration=1.0),
    ]
    assert VideoTranscript.join_segments(segments) == "Hello big world"


def test_join_segments_empty():
    assert VideoTranscript.join_segments([]) == ""


def test_transcript_segment_immutable():
    """Test that TranscriptSegment is immutable (frozen)."""
    segment = TranscriptSegment(text="Hello", start=0.0, duration=1.0)
    with pytest.raises(ValidationError):
        segment.text = "Changed"


def test_video_transcript_immutable(sample_video):
    with pytest.raises(ValidationError):
        sample_video.title = "Changed"


def test_video_transcript_optional_metadata():
    video = VideoTranscript(
        video_id="dQw4w9WgXcQ",
        title="T",
        transcript="text",
        url="https://youtu.be/dQw4w9WgXcQ",
    )
    assert video.thumbnail is None
    assert video.duration is None
    assert video.description is None
    assert video.segments == []


def test_ytdlp_info_ignores_unknown_fields():
    info = YtDlpVideoInfo(id="abc", title="T", formats=[{"id": 1}], duration=12.5)
    assert info.id == "abc"
    assert info.duration == 12.5
    assert not hasattr(info, "formats")


def test_video_url_request_rejects_extra_fields():
    with pytest.raises(ValidationError):
        VideoUrlRequest(url="https://youtu.be/dQw4w9WgXcQ", user_id="someone-else")
