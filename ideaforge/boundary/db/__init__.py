"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, OwnedMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - VideoModel, CommentModel, JobModel, IdeaModel: Domain entities
  - video_crud, comment_crud, job_crud, idea_crud: CRUD operation singletons

Dependencies: sqlalchemy, ideaforge.configs
System role: Persistence gateway for comments, videos, jobs and ideas
"""

from ideaforge.boundary.db.base import Base, OwnedMixin, TimestampMixin, UUIDMixin
from ideaforge.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from ideaforge.boundary.db.models import CommentModel, IdeaModel, JobModel, VideoModel
from ideaforge.boundary.db.CRUD import (
    BaseCRUD,
    CommentCRUD,
    IdeaCRUD,
    JobCRUD,
    VideoCRUD,
    comment_crud,
    idea_crud,
    job_crud,
    video_crud,
)

__all__ = [
    # Base classes
    "Base",
    "OwnedMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CommentModel",
    "IdeaModel",
    "JobModel",
    "VideoModel",
    # CRUD classes
    "BaseCRUD",
    "CommentCRUD",
    "IdeaCRUD",
    "JobCRUD",
    "VideoCRUD",
    # CRUD singletons
    "comment_crud",
    "idea_crud",
    "job_crud",
    "video_crud",
]
