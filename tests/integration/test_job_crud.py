"""
Test suite for JobCRUD database operations.

Runs against in-memory SQLite so the UPDATE ... RETURNING guards are
exercised for real.

System role: Verification of job persistence and the processed latch
"""

import pytest
from sqlalchemy import select

from ideaforge.boundary.db.CRUD.job_crud import JobCRUD, job_crud
from ideaforge.boundary.db.models import JobModel

USER_ID = "user-alice"
OTHER_USER_ID = "user-bob"


class TestJobCRUDInit:
    """Test suite for JobCRUD initialization."""

    def test_init_should_set_model_to_job_model(self) -> None:
        """Test JobCRUD initializes with JobModel."""
        # Act
        crud = JobCRUD()

        # Assert
        assert crud.model == JobModel


class TestJobCRUDCreate:
    """Test suite for job creation defaults."""

    @pytest.mark.asyncio
    async def test_create_should_apply_defaults(self, test_async_db) -> None:
        # Act
        job = await job_crud.create(test_async_db, user_id=USER_ID, kickoff_id="kick-1")

        # Assert
        assert job.id is not None
        assert job.job_state == "STARTED"
        assert job.processed is False
        assert job.job_result is None
        assert job.created_at is not None


class TestJobCRUDPending:
    """Test suite for pending-job queries."""

    @pytest.mark.asyncio
    async def test_get_pending_should_return_only_unprocessed_non_terminal(
        self, test_async_db, seed
    ) -> None:
        """Test terminal, processed and foreign jobs are excluded."""
        # Arrange
        pending = await seed.job(job_state="PENDING", minute=1)
        started = await seed.job(job_state="STARTED", minute=0)
        running = await seed.job(job_state="RUNNING", minute=2)
        await seed.job(job_state="SUCCESS", processed=True)
        await seed.job(job_state="FAILURE")
        await seed.job(job_state="CANCELLED")
        await seed.job(user_id=OTHER_USER_ID, job_state="RUNNING")

        # Act
        jobs = await job_crud.get_pending(test_async_db, USER_ID)

        # Assert
        assert [job.id for job in jobs] == [started.id, pending.id, running.id]

    @pytest.mark.asyncio
    async def test_has_pending_should_be_false_with_only_terminal_jobs(
        self, test_async_db, seed
    ) -> None:
        await seed.job(job_state="SUCCESS", processed=True)
        await seed.job(job_state="FAILURE")

        assert await job_crud.has_pending(test_async_db, USER_ID) is False

    @pytest.mark.asyncio
    async def test_has_pending_should_be_true_with_running_job(self, test_async_db, seed) -> None:
        await seed.job(job_state="RUNNING")

        assert await job_crud.has_pending(test_async_db, USER_ID) is True
        assert await job_crud.has_pending(test_async_db, OTHER_USER_ID) is False

    @pytest.mark.asyncio
    async def test_get_users_with_pending_should_return_distinct_users(
        self, test_async_db, seed
    ) -> None:
        await seed.job(job_state="STARTED")
        await seed.job(job_state="RUNNING")
        await seed.job(user_id=OTHER_USER_ID, job_state="PENDING")
        await seed.job(user_id="user-carol", job_state="FAILURE")

        users = await job_crud.get_users_with_pending(test_async_db)

        assert sorted(users) == [USER_ID, OTHER_USER_ID]


class TestJobCRUDUpdateState:
    """Test suite for JobCRUD.update_state()."""

    @pytest.mark.asyncio
    async def test_update_state_should_store_state_verbatim(self, test_async_db, seed) -> None:
        # Arrange
        job = await seed.job(job_state="STARTED")

        # Act
        updated = await job_crud.update_state(test_async_db, job.id, "QUEUED_REMOTE")

        # Assert
        assert updated is not None
        assert updated.job_state == "QUEUED_REMOTE"
        assert updated.id == job.id

    @pytest.mark.asyncio
    async def test_update_state_should_not_touch_processed_job(self, test_async_db, seed) -> None:
        """Test a processed SUCCESS job never regresses."""
        # Arrange
        job = await seed.job(job_state="SUCCESS", processed=True)

        # Act
        updated = await job_crud.update_state(test_async_db, job.id, "RUNNING")

        # Assert
        assert updated is None
        state = await test_async_db.scalar(select(JobModel.job_state).where(JobModel.id == job.id))
        assert state == "SUCCESS"


class TestJobCRUDMarkProcessed:
    """Test suite for JobCRUD.mark_processed()."""

    @pytest.mark.asyncio
    async def test_mark_processed_should_latch_once(self, test_async_db, seed) -> None:
        """Test only the first caller wins the processed latch."""
        # Arrange
        job = await seed.job(job_state="RUNNING")

        # Act
        first = await job_crud.mark_processed(test_async_db, job.id, "[]")
        second = await job_crud.mark_processed(test_async_db, job.id, '["other"]')

        # Assert
        assert first is True
        assert second is False
        row = (
            await test_async_db.execute(
                select(JobModel.job_state, JobModel.processed, JobModel.job_result).where(
                    JobModel.id == job.id
                )
            )
        ).one()
        assert row.job_state == "SUCCESS"
        assert row.processed is True
        assert row.job_result == "[]"
