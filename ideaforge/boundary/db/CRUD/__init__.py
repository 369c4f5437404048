"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from ideaforge.boundary.db.CRUD import comment_crud, job_crud

    batch = await comment_crud.get_unused_batch(db, user_id, limit=50)
"""

from ideaforge.boundary.db.CRUD.base_crud import BaseCRUD
from ideaforge.boundary.db.CRUD.comment_crud import CommentCRUD, comment_crud
from ideaforge.boundary.db.CRUD.idea_crud import IdeaCRUD, idea_crud
from ideaforge.boundary.db.CRUD.job_crud import JobCRUD, job_crud
from ideaforge.boundary.db.CRUD.video_crud import VideoCRUD, video_crud

__all__ = [
    "BaseCRUD",
    "CommentCRUD",
    "comment_crud",
    "IdeaCRUD",
    "idea_crud",
    "JobCRUD",
    "job_crud",
    "VideoCRUD",
    "video_crud",
]
