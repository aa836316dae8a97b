from sqlalchemy import Column, String, DateTime, func, JSON, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
from fastapi_users.db import SQLAlchemyBaseUserTableUUID
from fastapi_users_db_sqlalchemy.generics import GUID
from app.core.db import Base
import uuid

class User(SQLAlchemyBaseUserTableUUID, Base):
    """
    SQLAlchemy ORM model representing an authenticated user.
    """
    __tablename__ = "users"


class SummaryModel(Base):
    """
    SQLAlchemy ORM model representing a saved YouTube video summary.

    Rows are written once by the summary pipeline and only ever removed by an
    explicit delete.

    Attributes:
        id (UUID): Identifier generated on insert.
        user_id (UUID): Foreign key to the owning user.
        video_id (str): The 11-character YouTube video ID.
        video_title (str): Title of the video.
        video_url (str): URL the user submitted.
        video_thumbnail (str): Thumbnail URL, if known.
        transcript (str): Raw transcript text sent to the LLM.
        summary (str): The generated summary text.
        tags (list): Tags in extraction order, stored as a JSON array.
        duration (int): Video duration in seconds, if known.
        created_at (datetime): Timestamp of creation.
        updated_at (datetime): Timestamp of last update.
    """
    __tablename__ = "youtube_summaries"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    video_id = Column(String(32), nullable=False, index=True)
    video_title = Column(String, nullable=False)
    video_url = Column(String, nullable=False)
    video_thumbnail = Column(String, nullable=True)
    transcript = Column(Text, nullable=False)
    summary = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    duration = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=func.now(), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime, default=func.now(), server_default=func.now(), nullable=False)

    user = relationship("User", backref="summaries")
