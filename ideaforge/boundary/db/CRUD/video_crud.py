"""
Video CRUD operations.

Read-side queries the coordinator needs on videos.

Dependencies: sqlalchemy, ideaforge.boundary.db.models
System role: Video persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.boundary.db.CRUD.base_crud import BaseCRUD
from ideaforge.boundary.db.models.video_model import VideoModel


class VideoCRUD(BaseCRUD[VideoModel]):
    """CRUD operations for VideoModel."""

    def __init__(self) -> None:
        """Initialize VideoCRUD with VideoModel."""
        super().__init__(VideoModel)

    async def get_title(
        self,
        session: AsyncSession,
        user_id: str,
        video_id: UUID,
    ) -> str | None:
        """
        Look up a video title within the user's scope.

        Args:
            session: Async database session
            user_id: Owning user identifier
            video_id: Video UUID

        Returns:
            Title if the user owns the video, None otherwise
        """
        stmt = select(VideoModel.title).where(
            VideoModel.id == video_id,
            VideoModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


video_crud = VideoCRUD()
