"""
Idea CRUD operations.

Insert and list generated ideas.

Dependencies: sqlalchemy, ideaforge.boundary.db.models
System role: Idea persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.boundary.db.CRUD.base_crud import BaseCRUD
from ideaforge.boundary.db.models.idea_model import IdeaModel


class IdeaCRUD(BaseCRUD[IdeaModel]):
    """CRUD operations for IdeaModel."""

    def __init__(self) -> None:
        """Initialize IdeaCRUD with IdeaModel."""
        super().__init__(IdeaModel)

    async def list_newest_first(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[IdeaModel]:
        """
        Retrieve all ideas of a user, most recently created first.

        Args:
            session: Async database session
            user_id: Owning user identifier

        Returns:
            Sequence of IdeaModels
        """
        stmt = (
            select(IdeaModel)
            .where(IdeaModel.user_id == user_id)
            .order_by(IdeaModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


idea_crud = IdeaCRUD()
