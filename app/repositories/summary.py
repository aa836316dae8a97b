from typing import List, Optional
import uuid

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PersistenceError
from app.models.sql import SummaryModel


class SummaryRepository:
    """
    Repository layer for managing SummaryModel data.

    Writes are single insert/delete statements committed immediately. Failures
    roll the session back and surface as PersistenceError; nothing is retried.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the SummaryRepository.

        Args:
            db (AsyncSession): The SQLAlchemy async session for database operations.
        """
        self.db = db

    async def create_summary(self, summary: SummaryModel) -> SummaryModel:
        """
        Inserts a new summary record.

        Args:
            summary (SummaryModel): The summary to persist. Its ID is generated on insert.

        Returns:
            SummaryModel: The saved summary with generated ID and timestamps.

        Raises:
            PersistenceError: On constraint violation or transport error, or
                when the committed row cannot be reloaded.
        """
        try:
            self.db.add(summary)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Database error while saving summary for video {summary.video_id}: {e}")
            raise PersistenceError("Failed to save summary to database") from e

        # Row is committed from here on, so no rollback
        try:
            await self.db.refresh(summary)
        except SQLAlchemyError as e:
            logger.error(f"Summary {summary.id} was saved but could not be reloaded: {e}")
            raise PersistenceError(
                f"Summary {summary.id} was saved but could not be reloaded"
            ) from e
        return summary

    async def get_summary(self, summary_id: uuid.UUID, user_id: uuid.UUID) -> Optional[SummaryModel]:
        """
        Retrieves a summary by ID, scoped to its owner.
        """
        query = select(SummaryModel).where(
            SummaryModel.id == summary_id,
            SummaryModel.user_id == user_id,
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Database error while fetching summary {summary_id}: {e}")
            raise PersistenceError("Failed to fetch summary") from e
        return result.scalars().first()

    async def get_user_summaries(
        self, user_id: uuid.UUID, limit: int = 20, offset: int = 0
    ) -> List[SummaryModel]:
        """
        Retrieves the summaries of a user, newest first.

        Args:
            user_id (uuid.UUID): The owning user.
            limit (int): Maximum number of records to return.
            offset (int): Number of records to skip.

        Returns:
            List[SummaryModel]: Summaries ordered by creation time, descending.
        """
        query = (
            select(SummaryModel)
            .where(SummaryModel.user_id == user_id)
            .order_by(SummaryModel.created_at.desc(), SummaryModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing summaries for user {user_id}: {e}")
            raise PersistenceError("Failed to fetch saved summaries") from e
        return list(result.scalars().all())

    async def delete_summary(
        self, summary_id: uuid.UUID, user_id: Optional[uuid.UUID] = None
    ) -> None:
        """
        Deletes a summary by ID.

        Args:
            summary_id (uuid.UUID): The summary to delete.
            user_id (uuid.UUID, optional): When given, only a summary owned by this user is deleted.

        Raises:
            PersistenceError: If no matching summary exists (404) or the delete fails.
        """
        query = select(SummaryModel).where(SummaryModel.id == summary_id)
        if user_id is not None:
            query = query.where(SummaryModel.user_id == user_id)

        try:
            result = await self.db.execute(query)
            summary = result.scalars().first()
            if summary is None:
                raise PersistenceError(
                    f"Summary with id '{summary_id}' was not found.", status_code=404
                )
            await self.db.delete(summary)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Database error while deleting summary {summary_id}: {e}")
            raise PersistenceError("Failed to delete summary") from e
