"""
Idea generation job coordinator.

Owns the lifecycle of remote idea-generation jobs: batches a user's
unused comments, submits them, polls submitted jobs and turns successful
results into Idea rows exactly once.

Dependencies: ideaforge.boundary.db.CRUD, ideaforge.boundary.crew, ideaforge.core
System role: Job lifecycle orchestration
"""

import json
import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.boundary.crew.crew_client import CrewJobClient, idempotency_key
from ideaforge.boundary.db.CRUD.comment_crud import comment_crud
from ideaforge.boundary.db.CRUD.idea_crud import idea_crud
from ideaforge.boundary.db.CRUD.job_crud import job_crud
from ideaforge.boundary.db.CRUD.video_crud import video_crud
from ideaforge.boundary.db.models.idea_model import IdeaModel
from ideaforge.boundary.db.models.job_model import JobModel
from ideaforge.core.exceptions import NoInputAvailable, RemoteSubmissionFailed, Unauthenticated
from ideaforge.core.job_states import JobState, is_terminal
from ideaforge.core.payloads import parse_job_result, serialize_comment_batch
from ideaforge.models.idea import IdeaDetailResponse
from ideaforge.models.job import ReconcileSummary

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50
VIDEO_NOT_FOUND = "Video not found"
COMMENT_NOT_FOUND = "Comment not found"


def require_user(user_id: str | None) -> str:
    """
    Reject calls made without an authenticated identity.

    Args:
        user_id: Identity supplied by the auth collaborator

    Returns:
        str: The same identity, guaranteed non-empty

    Raises:
        Unauthenticated: If user_id is None or blank
    """
    if not user_id or not user_id.strip():
        raise Unauthenticated()
    return user_id


class IdeaCoordinator:
    """
    Idea generation job coordinator.

    Every operation takes the caller's user_id explicitly and only reads
    or writes rows owned by that user.
    """

    def __init__(
        self,
        db: AsyncSession,
        crew_client: CrewJobClient,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            db: AsyncSession for database operations
            crew_client: Client for the remote job service
            batch_size: Maximum comments per kickoff
        """
        self.db = db
        self.crew_client = crew_client
        self.batch_size = batch_size

    async def kickoff(self, user_id: str | None) -> JobModel:
        """
        Submit the user's oldest unused comments as a new idea-generation job.

        Comments are marked used and committed before the remote call, so
        a failed submission leaves them consumed with no job recorded.

        Args:
            user_id: Authenticated user identity

        Returns:
            JobModel: The recorded job (job_state=STARTED, processed=False)

        Raises:
            Unauthenticated: If user_id is absent
            NoInputAvailable: If the user has no unused comments
            RemoteSubmissionFailed: If the remote service rejects the job
        """
        user_id = require_user(user_id)

        batch = await comment_crud.get_unused_batch(self.db, user_id, self.batch_size)
        if not batch:
            raise NoInputAvailable(user_id)

        consumed = await comment_crud.mark_used(
            self.db, user_id, [item.comment_id for item in batch]
        )
        await self.db.commit()

        # A concurrent kickoff may have claimed some of the selected rows.
        batch = [item for item in batch if item.comment_id in consumed]
        if not batch:
            raise NoInputAvailable(user_id)

        logger.info(
            "Comments consumed for idea generation",
            extra={"user_id": user_id, "comment_count": len(batch)},
        )

        try:
            kickoff_id = await self.crew_client.kickoff(
                serialize_comment_batch(batch),
                idempotency=idempotency_key(item.comment_id for item in batch),
            )
        except RemoteSubmissionFailed:
            logger.error(
                "Kickoff failed after comments were consumed",
                extra={"user_id": user_id, "comment_count": len(batch)},
            )
            raise

        job = await job_crud.create(
            self.db,
            user_id=user_id,
            kickoff_id=kickoff_id,
            job_state=JobState.STARTED.value,
            processed=False,
        )
        await self.db.commit()

        logger.info(
            "Idea generation job started",
            extra={"user_id": user_id, "job_id": str(job.id), "kickoff_id": kickoff_id},
        )
        return job

    async def reconcile(self, user_id: str | None) -> ReconcileSummary:
        """
        Poll the user's in-flight jobs and store results of finished ones.

        Each job runs in its own transaction. A failure on one job is
        logged and rolled back, and the remaining jobs are still processed.
        A job whose status could not be fetched stays eligible for the next
        poll. A SUCCESS job whose result cannot be stored keeps its SUCCESS
        state with processed=False and is not polled again.

        Args:
            user_id: Authenticated user identity

        Returns:
            ReconcileSummary: Counts of jobs checked, completed and failed

        Raises:
            Unauthenticated: If user_id is absent
        """
        user_id = require_user(user_id)
        summary = ReconcileSummary()

        jobs = await job_crud.get_pending(self.db, user_id)
        if not jobs:
            return summary

        # Plain values: a rollback below expires the ORM instances.
        targets = [(job.id, job.kickoff_id) for job in jobs]

        for job_id, kickoff_id in targets:
            summary.jobs_checked += 1
            try:
                ideas_created = await self._reconcile_job(user_id, job_id, kickoff_id)
                await self.db.commit()
            except Exception as e:
                await self.db.rollback()
                summary.jobs_failed += 1
                logger.error(
                    f"Error processing job {kickoff_id}",
                    extra={
                        "user_id": user_id,
                        "kickoff_id": kickoff_id,
                        "error": str(e),
                        "error_type": type(e).__name__,
                    },
                )
                continue

            if ideas_created is not None:
                summary.jobs_completed += 1
                summary.ideas_created += ideas_created

        logger.info(
            "Reconciliation finished",
            extra={"user_id": user_id, **summary.model_dump()},
        )
        return summary

    async def _reconcile_job(
        self,
        user_id: str,
        job_id: UUID,
        kickoff_id: str,
    ) -> int | None:
        """
        Poll one job and, on SUCCESS, latch it and insert its ideas.

        Returns:
            Number of ideas inserted, or None if the job is still running,
            ended without success, or was already processed elsewhere
        """
        status = await self.crew_client.get_status(kickoff_id)
        await job_crud.update_state(self.db, job_id, status.state)

        if status.state != JobState.SUCCESS.value:
            if is_terminal(status.state):
                logger.warning(
                    "Job ended without success",
                    extra={"kickoff_id": kickoff_id, "state": status.state},
                )
            return None

        # SUCCESS is recorded before parsing so an unusable result takes the
        # job out of the polling set instead of being fetched forever.
        await self.db.commit()

        entries = parse_job_result(status.result, kickoff_id)
        raw_result = status.result if isinstance(status.result, str) else json.dumps(status.result)

        if not await job_crud.mark_processed(self.db, job_id, raw_result):
            logger.info(
                "Job already processed, skipping idea insert",
                extra={"kickoff_id": kickoff_id},
            )
            return None

        ideas = await idea_crud.create_many(
            self.db,
            [
                {
                    "user_id": user_id,
                    "video_id": entry.video_id,
                    "comment_id": entry.comment_id,
                    "video_title": entry.video_title,
                    "score": entry.score,
                    "description": entry.description,
                    "research": entry.research_urls,
                }
                for entry in entries
            ],
        )
        logger.info(
            "Job result stored",
            extra={"kickoff_id": kickoff_id, "idea_count": len(ideas)},
        )
        return len(ideas)

    async def has_pending(self, user_id: str | None) -> bool:
        """
        Check whether the user has jobs still in flight.

        Args:
            user_id: Authenticated user identity

        Returns:
            True if any unprocessed job is PENDING, STARTED or RUNNING

        Raises:
            Unauthenticated: If user_id is absent
        """
        user_id = require_user(user_id)
        return await job_crud.has_pending(self.db, user_id)

    async def get_ideas(self, user_id: str | None) -> Sequence[IdeaModel]:
        """
        List the user's ideas, most recently created first.

        Raises:
            Unauthenticated: If user_id is absent
        """
        user_id = require_user(user_id)
        return await idea_crud.list_newest_first(self.db, user_id)

    async def get_idea_detail(
        self,
        user_id: str | None,
        video_id: UUID,
        comment_id: UUID,
    ) -> IdeaDetailResponse:
        """
        Resolve display strings for an idea's source video and comment.

        Each half is looked up independently; a missing or foreign row
        yields a "not found" sentinel instead of an error.

        Args:
            user_id: Authenticated user identity
            video_id: Source video UUID
            comment_id: Source comment UUID

        Returns:
            IdeaDetailResponse: video_title and comment_text

        Raises:
            Unauthenticated: If user_id is absent
        """
        user_id = require_user(user_id)
        video_title = await video_crud.get_title(self.db, user_id, video_id)
        comment_text = await comment_crud.get_text(self.db, user_id, comment_id)
        return IdeaDetailResponse(
            video_title=video_title or VIDEO_NOT_FOUND,
            comment_text=comment_text or COMMENT_NOT_FOUND,
        )
