"""
Comment CRUD operations.

Selects unused comments for a kickoff batch and flips their consumption
flag with an optimistic guard.

Dependencies: sqlalchemy, ideaforge.boundary.db.models, ideaforge.models
System role: Comment persistence and consumption
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.boundary.db.base import utcnow
from ideaforge.boundary.db.CRUD.base_crud import BaseCRUD
from ideaforge.boundary.db.models.comment_model import CommentModel
from ideaforge.boundary.db.models.video_model import VideoModel
from ideaforge.models.comment import CommentBatchItem


class CommentCRUD(BaseCRUD[CommentModel]):
    """
    CRUD operations for CommentModel.

    Extends BaseCRUD with the batch selection and consumption queries
    used by kickoff.
    """

    def __init__(self) -> None:
        """Initialize CommentCRUD with CommentModel."""
        super().__init__(CommentModel)

    async def get_unused_batch(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int,
    ) -> list[CommentBatchItem]:
        """
        Select the oldest unused comments of a user with their video titles.

        Args:
            session: Async database session
            user_id: Owning user identifier
            limit: Maximum number of comments to return

        Returns:
            list[CommentBatchItem]: Oldest first, at most ``limit`` items
        """
        stmt = (
            select(
                VideoModel.title,
                CommentModel.comment_text,
                VideoModel.id,
                CommentModel.id,
            )
            .join(VideoModel, CommentModel.video_id == VideoModel.id)
            .where(
                CommentModel.user_id == user_id,
                CommentModel.is_used.is_(False),
            )
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [
            CommentBatchItem(
                title=title,
                comment=comment_text,
                video_id=video_id,
                comment_id=comment_id,
            )
            for title, comment_text, video_id, comment_id in result.all()
        ]

    async def mark_used(
        self,
        session: AsyncSession,
        user_id: str,
        comment_ids: Sequence[UUID],
    ) -> set[UUID]:
        """
        Flip is_used on the given comments if they are still unused.

        The ``is_used = false`` predicate makes this a compare-and-set:
        a concurrent kickoff that already consumed a row wins it, and the
        row is left out of the returned set.

        Args:
            session: Async database session
            user_id: Owning user identifier
            comment_ids: Comments to consume

        Returns:
            set[UUID]: Ids this call actually consumed
        """
        if not comment_ids:
            return set()

        stmt = (
            update(CommentModel)
            .where(
                CommentModel.user_id == user_id,
                CommentModel.id.in_(list(comment_ids)),
                CommentModel.is_used.is_(False),
            )
            .values(is_used=True, updated_at=utcnow())
            .returning(CommentModel.id)
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def get_text(
        self,
        session: AsyncSession,
        user_id: str,
        comment_id: UUID,
    ) -> str | None:
        """
        Look up a comment's text within the user's scope.

        Args:
            session: Async database session
            user_id: Owning user identifier
            comment_id: Comment UUID

        Returns:
            Comment text if the user owns the comment, None otherwise
        """
        stmt = select(CommentModel.comment_text).where(
            CommentModel.id == comment_id,
            CommentModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


comment_crud = CommentCRUD()
