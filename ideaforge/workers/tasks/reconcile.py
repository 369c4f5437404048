"""
Job reconciliation Celery tasks.

Tasks:
- ideas.reconcile_user_jobs(user_id): poll one user's in-flight jobs
- ideas.reconcile_all_pending(): poll every user that has in-flight jobs

Each task run builds its own engine and remote client inside a fresh
event loop and disposes them before returning.

Dependencies: celery, sqlalchemy, ideaforge.application, ideaforge.boundary
System role: Scheduled job polling
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from ideaforge.application.services import IdeaCoordinator
from ideaforge.boundary.crew import CrewJobClient
from ideaforge.boundary.db.CRUD.job_crud import job_crud
from ideaforge.configs import get_settings
from ideaforge.models.job import ReconcileSummary
from ideaforge.workers import celery_app

logger = logging.getLogger(__name__)


def run_async(coro):
    """Run an async coroutine to completion from a Celery task."""
    return asyncio.run(coro)


@asynccontextmanager
async def task_resources() -> AsyncIterator[tuple[async_sessionmaker[AsyncSession], CrewJobClient]]:
    """
    Session factory and remote client scoped to one task run.

    NullPool keeps asyncpg connections from outliving the event loop
    created by run_async.
    """
    settings = get_settings()
    engine = create_async_engine(
        settings.database.async_database_url,
        poolclass=NullPool,
    )
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    try:
        async with CrewJobClient(settings.crew) as client:
            yield session_factory, client
    finally:
        await engine.dispose()


async def reconcile_user(
    session_factory: async_sessionmaker[AsyncSession],
    client: CrewJobClient,
    user_id: str,
) -> ReconcileSummary:
    """Reconcile one user's jobs in a dedicated session."""
    async with session_factory() as session:
        coordinator = IdeaCoordinator(
            db=session,
            crew_client=client,
            batch_size=get_settings().ideas.batch_size,
        )
        return await coordinator.reconcile(user_id)


async def reconcile_all_users(
    session_factory: async_sessionmaker[AsyncSession],
    client: CrewJobClient,
) -> dict:
    """
    Reconcile every user that has unprocessed, non-terminal jobs.

    A user whose pass raises is logged and counted; the rest still run.

    Returns:
        dict: users_checked, users_failed plus summed ReconcileSummary counts
    """
    async with session_factory() as session:
        user_ids = await job_crud.get_users_with_pending(session)

    totals = ReconcileSummary()
    users_failed = 0

    for user_id in user_ids:
        try:
            summary = await reconcile_user(session_factory, client, user_id)
        except Exception as e:
            users_failed += 1
            logger.error(
                "Reconciliation failed for user",
                extra={"user_id": user_id, "error": str(e)},
            )
            continue
        totals.jobs_checked += summary.jobs_checked
        totals.jobs_completed += summary.jobs_completed
        totals.ideas_created += summary.ideas_created
        totals.jobs_failed += summary.jobs_failed

    return {
        "users_checked": len(user_ids),
        "users_failed": users_failed,
        **totals.model_dump(),
    }


@celery_app.task(name="ideas.reconcile_user_jobs", bind=True)
def reconcile_user_jobs(self, user_id: str) -> dict:
    """
    Poll one user's in-flight jobs and store finished results.

    Args:
        user_id: Owning user identity

    Returns:
        dict: ReconcileSummary fields
    """
    async def _run() -> dict:
        async with task_resources() as (session_factory, client):
            summary = await reconcile_user(session_factory, client, user_id)
            return summary.model_dump()

    logger.info("Reconciling jobs for user", extra={"user_id": user_id, "task_id": self.request.id})
    return run_async(_run())


@celery_app.task(name="ideas.reconcile_all_pending", bind=True)
def reconcile_all_pending(self) -> dict:
    """
    Poll in-flight jobs for every user (beat entry point).

    Returns:
        dict: Per-run totals across users
    """
    async def _run() -> dict:
        async with task_resources() as (session_factory, client):
            return await reconcile_all_users(session_factory, client)

    result = run_async(_run())
    logger.info("Scheduled reconciliation finished", extra={"task_id": self.request.id, **result})
    return result
