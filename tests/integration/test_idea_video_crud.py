"""
Test suite for IdeaCRUD, VideoCRUD and the shared BaseCRUD helpers.

System role: Verification of idea listing and owner-scoped reads
"""

import uuid

import pytest

from ideaforge.boundary.db.CRUD.idea_crud import idea_crud
from ideaforge.boundary.db.CRUD.video_crud import video_crud

USER_ID = "user-alice"
OTHER_USER_ID = "user-bob"


class TestIdeaCRUD:
    """Test suite for IdeaCRUD."""

    @pytest.mark.asyncio
    async def test_list_newest_first_should_order_by_created_at_desc(
        self, test_async_db, seed
    ) -> None:
        # Arrange
        oldest = await seed.idea(description="oldest", minute=0)
        newest = await seed.idea(description="newest", minute=20)
        middle = await seed.idea(description="middle", minute=10)
        await seed.idea(user_id=OTHER_USER_ID, minute=30)

        # Act
        ideas = await idea_crud.list_newest_first(test_async_db, USER_ID)

        # Assert
        assert [idea.id for idea in ideas] == [newest.id, middle.id, oldest.id]

    @pytest.mark.asyncio
    async def test_create_many_should_insert_all_rows(self, test_async_db) -> None:
        """Test bulk insert applies column defaults."""
        # Arrange
        rows = [
            {
                "user_id": USER_ID,
                "video_id": uuid.uuid4(),
                "comment_id": uuid.uuid4(),
                "description": f"idea {i}",
            }
            for i in range(3)
        ]

        # Act
        ideas = await idea_crud.create_many(test_async_db, rows)

        # Assert
        assert len(ideas) == 3
        assert all(idea.id is not None for idea in ideas)
        assert all(idea.score == 0 for idea in ideas)
        assert all(idea.research == [] for idea in ideas)
        assert len(await idea_crud.get_all_for_user(test_async_db, USER_ID)) == 3

    @pytest.mark.asyncio
    async def test_create_many_should_accept_empty_rows(self, test_async_db) -> None:
        assert await idea_crud.create_many(test_async_db, []) == []


class TestVideoCRUD:
    """Test suite for VideoCRUD."""

    @pytest.mark.asyncio
    async def test_get_title_should_be_scoped_to_owner(self, test_async_db, seed) -> None:
        # Arrange
        video = await seed.video(title="Color grading")

        # Act / Assert
        assert await video_crud.get_title(test_async_db, USER_ID, video.id) == "Color grading"
        assert await video_crud.get_title(test_async_db, OTHER_USER_ID, video.id) is None
        assert await video_crud.get_title(test_async_db, USER_ID, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_owned_should_hide_foreign_rows(self, test_async_db, seed) -> None:
        video = await seed.video()

        assert (await video_crud.get_owned(test_async_db, USER_ID, video.id)).id == video.id
        assert await video_crud.get_owned(test_async_db, OTHER_USER_ID, video.id) is None

    @pytest.mark.asyncio
    async def test_delete_by_id_should_remove_row(self, test_async_db, seed) -> None:
        video = await seed.video()

        assert await video_crud.delete_by_id(test_async_db, video.id) is True
        assert await video_crud.get_by_id(test_async_db, video.id) is None

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_updated_row(self, test_async_db, seed) -> None:
        video = await seed.video(title="Draft")

        updated = await video_crud.update_by_id(test_async_db, video.id, title="Final")

        assert updated is not None
        assert updated.title == "Final"
        assert await video_crud.update_by_id(test_async_db, uuid.uuid4(), title="x") is None
