"""
Tests for the reconciliation Celery tasks.
"""

import json
import uuid
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ideaforge.boundary.db.base import Base
from ideaforge.boundary.db.models import IdeaModel, JobModel
from ideaforge.core.exceptions import RemoteStatusFailed
from ideaforge.models.crew import StatusResponse
from ideaforge.models.job import ReconcileSummary
from ideaforge.workers import celery_app
from ideaforge.workers.tasks import reconcile as reconcile_tasks


# ========================================
# Fixtures
# ========================================

@pytest.fixture
async def session_factory():
    """Session factory over a shared in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


async def add_job(session_factory, user_id: str, kickoff_id: str, job_state: str = "RUNNING"):
    async with session_factory() as session:
        session.add(JobModel(user_id=user_id, kickoff_id=kickoff_id, job_state=job_state))
        await session.commit()


def success_status() -> StatusResponse:
    entry = {
        "video_id": str(uuid.uuid4()),
        "comment_id": str(uuid.uuid4()),
        "description": "An idea",
    }
    return StatusResponse(state="SUCCESS", result=json.dumps([entry]))


# ========================================
# Test reconcile_all_users
# ========================================

@pytest.mark.asyncio
async def test_reconcile_all_users_polls_every_user_with_pending_jobs(session_factory):
    """Test each user with in-flight jobs is reconciled and totals are summed."""
    # Arrange
    await add_job(session_factory, "user-alice", "kick-a1")
    await add_job(session_factory, "user-alice", "kick-a2", job_state="STARTED")
    await add_job(session_factory, "user-bob", "kick-b1")
    await add_job(session_factory, "user-carol", "kick-c1", job_state="FAILURE")

    client = AsyncMock()
    client.get_status.return_value = success_status()

    # Act
    result = await reconcile_tasks.reconcile_all_users(session_factory, client)

    # Assert
    assert result["users_checked"] == 2
    assert result["users_failed"] == 0
    assert result["jobs_checked"] == 3
    assert result["jobs_completed"] == 3
    assert result["ideas_created"] == 3
    polled = sorted(call.args[0] for call in client.get_status.await_args_list)
    assert polled == ["kick-a1", "kick-a2", "kick-b1"]

    async with session_factory() as session:
        owners = (await session.scalars(select(IdeaModel.user_id))).all()
        pending = await session.scalar(
            select(func.count()).select_from(JobModel).where(JobModel.processed.is_(False))
        )
    assert sorted(owners) == ["user-alice", "user-alice", "user-bob"]
    assert pending == 1  # carol's FAILURE job


@pytest.mark.asyncio
async def test_reconcile_all_users_counts_job_failures(session_factory):
    """Test per-job failures are reported in totals, not raised."""
    # Arrange
    await add_job(session_factory, "user-alice", "kick-a1")
    client = AsyncMock()
    client.get_status.side_effect = RemoteStatusFailed("Failed to fetch job status", "kick-a1")

    # Act
    result = await reconcile_tasks.reconcile_all_users(session_factory, client)

    # Assert
    assert result["jobs_failed"] == 1
    assert result["jobs_completed"] == 0


@pytest.mark.asyncio
async def test_reconcile_all_users_continues_after_user_failure(session_factory):
    """Test a user whose whole pass raises does not stop the others."""
    # Arrange
    await add_job(session_factory, "user-alice", "kick-a1")
    await add_job(session_factory, "user-bob", "kick-b1")

    async def flaky(factory, client, user_id):
        if user_id == "user-alice":
            raise RuntimeError("database went away")
        return ReconcileSummary(jobs_checked=1, jobs_completed=1, ideas_created=2)

    # Act
    with patch.object(reconcile_tasks, "reconcile_user", side_effect=flaky):
        result = await reconcile_tasks.reconcile_all_users(session_factory, AsyncMock())

    # Assert
    assert result["users_checked"] == 2
    assert result["users_failed"] == 1
    assert result["ideas_created"] == 2


@pytest.mark.asyncio
async def test_reconcile_all_users_without_pending_jobs(session_factory):
    client = AsyncMock()

    result = await reconcile_tasks.reconcile_all_users(session_factory, client)

    assert result["users_checked"] == 0
    client.get_status.assert_not_awaited()


@pytest.mark.asyncio
async def test_reconcile_user_only_touches_that_user(session_factory):
    await add_job(session_factory, "user-alice", "kick-a1")
    await add_job(session_factory, "user-bob", "kick-b1")
    client = AsyncMock()
    client.get_status.return_value = StatusResponse(state="RUNNING")

    summary = await reconcile_tasks.reconcile_user(session_factory, client, "user-bob")

    assert summary.jobs_checked == 1
    client.get_status.assert_awaited_once_with("kick-b1")


# ========================================
# Test Celery task wrappers
# ========================================

@asynccontextmanager
async def fake_resources():
    yield MagicMock(), MagicMock()


def test_reconcile_user_jobs_task_returns_summary_dict():
    """Test the task runs the coroutine to completion and returns plain data."""
    summary = ReconcileSummary(jobs_checked=2, jobs_completed=1, ideas_created=5)

    with patch.object(reconcile_tasks, "task_resources", fake_resources), \
         patch.object(reconcile_tasks, "reconcile_user", AsyncMock(return_value=summary)) as run:
        result = reconcile_tasks.reconcile_user_jobs("user-alice")

    assert result == summary.model_dump()
    assert run.await_args.args[2] == "user-alice"


def test_reconcile_all_pending_task_returns_totals():
    totals = {"users_checked": 1, "users_failed": 0, "jobs_checked": 1,
              "jobs_completed": 1, "ideas_created": 1, "jobs_failed": 0}

    with patch.object(reconcile_tasks, "task_resources", fake_resources), \
         patch.object(reconcile_tasks, "reconcile_all_users", AsyncMock(return_value=totals)):
        result = reconcile_tasks.reconcile_all_pending()

    assert result == totals


def test_tasks_are_registered_and_scheduled():
    assert "ideas.reconcile_user_jobs" in celery_app.tasks
    assert "ideas.reconcile_all_pending" in celery_app.tasks

    entry = celery_app.conf.beat_schedule["reconcile-pending-idea-jobs"]
    assert entry["task"] == "ideas.reconcile_all_pending"
    assert entry["schedule"] == 60.0
