"""
Pydantic models for API request/response schemas.
"""
from datetime import datetime
from typing import List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from fastapi_users import schemas

from app.models.youtube import VideoTranscript


class VideoUrlRequest(BaseModel):
    """Request model carrying a single YouTube video URL."""

    url: str = Field(min_length=1, max_length=2048)

    model_config = ConfigDict(extra="forbid")

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        """Trim surrounding whitespace pasted along with the link."""
        v = v.strip()
        if not v:
            raise ValueError("URL must not be blank")
        return v


class GenerateSummaryRequest(BaseModel):
    """Request model for summarizing an already extracted transcript."""

    transcript: str = Field(min_length=1)
    video: VideoTranscript

    model_config = ConfigDict(extra="forbid")


class VideoIdResponse(BaseModel):
    """Response model for video ID lookups."""

    url: str
    video_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SummaryRecord(BaseModel):
    """Read model for a persisted video summary."""

    id: uuid.UUID
    video_id: str
    video_title: str
    video_url: str
    video_thumbnail: Optional[str] = None
    transcript: str
    summary: str
    tags: List[str]
    duration: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GeneratedSummary(BaseModel):
    """Result of a successful summary pipeline run."""

    record: SummaryRecord
    summary_text: str
    tags: List[str]

    model_config = ConfigDict(frozen=True)


# FastAPI-Users schemas
class UserRead(schemas.BaseUser[uuid.UUID]):
    """Schema for reading user data."""

    pass


class UserCreate(schemas.BaseUserCreate):
    """Schema for creating users."""

    pass


class UserUpdate(schemas.BaseUserUpdate):
    """Schema for updating users."""

    pass
