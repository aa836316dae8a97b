"""
Shared pytest fixtures and configuration.
"""
import os

# Required settings must exist before the application modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FILE", "")

import pytest
from unittest.mock import AsyncMock, MagicMock
import uuid
from datetime import datetime

from app.main import app
from app.api.dependencies import get_note_service
from app.api.auth import current_active_user
from app.models import SummaryRecord, VideoTranscript
from app.models.sql import User


@pytest.fixture
def mock_user_id():
    """Generate a mock user UUID."""
    return uuid.uuid4()


@pytest.fixture
def mock_user(mock_user_id):
    """Create a mock User object."""
    user = MagicMock(spec=User)
    user.id = mock_user_id
    user.email = "test@example.com"
    user.is_active = True
    user.is_verified = True
    user.is_superuser = False
    return user


@pytest.fixture
def sample_video():
    """A transcript as returned by the extractor."""
    return VideoTranscript(
        video_id="dQw4w9WgXcQ",
        title="Intro to Go Testing",
        transcript="Today we write table driven tests in Go.",
        url="https://youtu.be/dQw4w9WgXcQ",
        thumbnail="https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
        duration=212,
    )


@pytest.fixture
def sample_record(sample_video):
    """A persisted summary built from sample_video."""
    now = datetime(2026, 10, 19, 12, 0, 0)
    return SummaryRecord(
        id=uuid.uuid4(),
        video_id=sample_video.video_id,
        video_title=sample_video.title,
        video_url=sample_video.url,
        video_thumbnail=sample_video.thumbnail,
        transcript=sample_video.transcript,
        summary="Summary\nTags: go, testing, backend",
        tags=["go", "testing", "backend"],
        duration=sample_video.duration,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_note_service():
    """Create a mock YouTubeNoteService."""
    return AsyncMock()


@pytest.fixture
def override_dependencies(mock_user, mock_note_service):
    """Override FastAPI dependencies for testing."""
    async def override_current_active_user():
        return mock_user

    def override_get_note_service():
        return mock_note_service

    app.dependency_overrides[current_active_user] = override_current_active_user
    app.dependency_overrides[get_note_service] = override_get_note_service

    yield

    app.dependency_overrides.clear()
