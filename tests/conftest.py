"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database session, row seeding helpers, remote client mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import os
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

# Required settings must exist before ideaforge.workers is imported.
os.environ.setdefault("CREWAI_URL", "http://crew.test")
os.environ.setdefault("CREWAI_BEARER_TOKEN", "test-token")

USER_ID = "user-alice"
OTHER_USER_ID = "user-bob"
BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from ideaforge.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


class Seeder:
    """Inserts owned rows with deterministic timestamps."""

    def __init__(self, session):
        self.session = session

    async def video(self, user_id: str = USER_ID, title: str = "How I edit videos"):
        from ideaforge.boundary.db.models import VideoModel

        video = VideoModel(user_id=user_id, title=title)
        self.session.add(video)
        await self.session.flush()
        return video

    async def comments(
        self,
        video,
        count: int,
        user_id: str = USER_ID,
        is_used: bool = False,
        start_minute: int = 0,
    ):
        """Add ``count`` comments, one minute apart, oldest first."""
        from ideaforge.boundary.db.models import CommentModel

        rows = [
            CommentModel(
                user_id=user_id,
                video_id=video.id,
                comment_text=f"comment {start_minute + i}",
                is_used=is_used,
                created_at=BASE_TIME + timedelta(minutes=start_minute + i),
            )
            for i in range(count)
        ]
        self.session.add_all(rows)
        await self.session.flush()
        return rows

    async def job(
        self,
        user_id: str = USER_ID,
        job_state: str = "STARTED",
        processed: bool = False,
        kickoff_id: str | None = None,
        minute: int = 0,
    ):
        from ideaforge.boundary.db.models import JobModel

        job = JobModel(
            user_id=user_id,
            kickoff_id=kickoff_id or f"kick-{uuid.uuid4().hex[:12]}",
            job_state=job_state,
            processed=processed,
            created_at=BASE_TIME + timedelta(minutes=minute),
        )
        self.session.add(job)
        await self.session.flush()
        return job

    async def idea(self, user_id: str = USER_ID, description: str = "An idea", minute: int = 0):
        from ideaforge.boundary.db.models import IdeaModel

        idea = IdeaModel(
            user_id=user_id,
            video_id=uuid.uuid4(),
            comment_id=uuid.uuid4(),
            video_title="Some video",
            description=description,
            score=5,
            research=["https://example.com/a"],
            created_at=BASE_TIME + timedelta(minutes=minute),
        )
        self.session.add(idea)
        await self.session.flush()
        return idea


@pytest.fixture
def seed(test_async_db) -> Seeder:
    """Row seeding helper bound to the test database session."""
    return Seeder(test_async_db)


@pytest.fixture
def mock_crew_client():
    """
    Create mock CrewJobClient for testing.

    Returns:
        AsyncMock: kickoff returns "kick-123"; get_status must be set per test
    """
    from ideaforge.boundary.crew import CrewJobClient

    client = AsyncMock(spec=CrewJobClient)
    client.kickoff = AsyncMock(return_value="kick-123")
    client.get_status = AsyncMock()
    return client


@pytest.fixture
def crew_settings():
    """CrewSettings built explicitly, independent of the environment."""
    from ideaforge.configs.crew import CrewSettings

    return CrewSettings(url="http://crew.test/", bearer_token="secret-token", request_timeout=5.0)
