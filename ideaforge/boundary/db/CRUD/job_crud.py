"""
Job CRUD operations.

Provides job-specific queries for pending-job lookup, state updates and
the one-way processed latch.

Dependencies: sqlalchemy, ideaforge.boundary.db.models
System role: Remote job persistence for kickoff and reconciliation
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.boundary.db.base import utcnow
from ideaforge.boundary.db.CRUD.base_crud import BaseCRUD
from ideaforge.boundary.db.models.job_model import JobModel
from ideaforge.core.job_states import NON_TERMINAL_STATES, JobState


class JobCRUD(BaseCRUD[JobModel]):
    """
    CRUD operations for JobModel.

    Extends BaseCRUD with the polling-eligibility filter
    (processed = false and state non-terminal) and guarded updates.
    """

    def __init__(self) -> None:
        """Initialize JobCRUD with JobModel."""
        super().__init__(JobModel)

    def _pending_filter(self, user_id: str):
        return (
            JobModel.user_id == user_id,
            JobModel.processed.is_(False),
            JobModel.job_state.in_(NON_TERMINAL_STATES),
        )

    async def get_pending(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[JobModel]:
        """
        Retrieve a user's unprocessed jobs in a non-terminal state.

        Args:
            session: Async database session
            user_id: Owning user identifier

        Returns:
            Sequence of JobModels eligible for polling, oldest first
        """
        stmt = (
            select(JobModel)
            .where(*self._pending_filter(user_id))
            .order_by(JobModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def has_pending(self, session: AsyncSession, user_id: str) -> bool:
        """
        Check whether a user has any job still eligible for polling.

        Args:
            session: Async database session
            user_id: Owning user identifier

        Returns:
            True if at least one unprocessed non-terminal job exists
        """
        stmt = select(JobModel.id).where(*self._pending_filter(user_id)).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_users_with_pending(self, session: AsyncSession) -> list[str]:
        """
        List users that have at least one job eligible for polling.

        Args:
            session: Async database session

        Returns:
            list[str]: Distinct user identifiers
        """
        stmt = (
            select(JobModel.user_id)
            .where(
                JobModel.processed.is_(False),
                JobModel.job_state.in_(NON_TERMINAL_STATES),
            )
            .distinct()
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def update_state(
        self,
        session: AsyncSession,
        id: UUID,
        job_state: str,
    ) -> JobModel | None:
        """
        Record the latest provider state of an unprocessed job.

        Processed jobs are never touched, so a terminal SUCCESS cannot regress.

        Args:
            session: Async database session
            id: Job UUID
            job_state: State reported by the provider (stored verbatim)

        Returns:
            Updated JobModel, None if missing or already processed
        """
        stmt = (
            update(JobModel)
            .where(JobModel.id == id, JobModel.processed.is_(False))
            .values(job_state=job_state, updated_at=utcnow())
            .returning(JobModel)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_processed(
        self,
        session: AsyncSession,
        id: UUID,
        job_result: str,
    ) -> bool:
        """
        Latch a SUCCESS job as processed and store its raw result.

        Only the caller that flips processed from false to true gets True;
        that caller is the one allowed to insert the job's ideas.

        Args:
            session: Async database session
            id: Job UUID
            job_result: Raw JSON result text

        Returns:
            True if this call set the latch, False if it was already set
        """
        stmt = (
            update(JobModel)
            .where(JobModel.id == id, JobModel.processed.is_(False))
            .values(
                job_state=JobState.SUCCESS.value,
                job_result=job_result,
                processed=True,
                updated_at=utcnow(),
            )
            .returning(JobModel.id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


job_crud = JobCRUD()
