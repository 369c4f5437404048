"""
Database models package.

Exports:
  - VideoModel: Video ORM model
  - CommentModel: Video comment ORM model
  - JobModel: Remote idea-generation job ORM model
  - IdeaModel: Generated idea ORM model

Dependencies: sqlalchemy, ideaforge.boundary.db.base
System role: Database model definitions for domain entities
"""

from ideaforge.boundary.db.models.video_model import VideoModel
from ideaforge.boundary.db.models.comment_model import CommentModel
from ideaforge.boundary.db.models.job_model import JobModel
from ideaforge.boundary.db.models.idea_model import IdeaModel

__all__ = [
    "VideoModel",
    "CommentModel",
    "JobModel",
    "IdeaModel",
]
