"""
Video ORM model.

A user's video whose comments feed idea generation. Read-only from the
coordinator's perspective; rows are written by the ingestion process.

Dependencies: sqlalchemy, ideaforge.boundary.db.base
System role: Video persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ideaforge.boundary.db.base import Base, OwnedMixin, TimestampMixin, UUIDMixin


class VideoModel(Base, UUIDMixin, TimestampMixin, OwnedMixin):
    """
    Video ORM model.

    Attributes:
        id: UUID primary key
        user_id: Owning user
        title: Video title shown next to generated ideas
        youtube_video_id: Platform identifier (optional)
        comments: Comments left on this video (cascade delete)
    """

    __tablename__ = "videos"

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    youtube_video_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=None,
        doc="YouTube video identifier",
    )

    comments = relationship(
        "CommentModel",
        back_populates="video",
        cascade="all, delete-orphan",
    )
