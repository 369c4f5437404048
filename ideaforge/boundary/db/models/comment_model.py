"""
Comment ORM model.

Video comments are the raw input of idea generation. Each comment is
consumed at most once: kickoff flips is_used and it is never selected again.

Dependencies: sqlalchemy, ideaforge.boundary.db.base
System role: Comment persistence and consumption tracking
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ideaforge.boundary.db.base import Base, OwnedMixin, TimestampMixin, UUIDMixin


class CommentModel(Base, UUIDMixin, TimestampMixin, OwnedMixin):
    """
    Video comment ORM model.

    Attributes:
        id: UUID primary key
        user_id: Owning user
        video_id: Parent video
        comment_text: Comment body
        is_used: True once submitted in a kickoff batch (one-way)
    """

    __tablename__ = "video_comments"
    __table_args__ = (
        Index("ix_video_comments_user_unused", "user_id", "is_used", "created_at"),
    )

    video_id: Mapped[UUID] = mapped_column(
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    comment_text: Mapped[str] = mapped_column(Text, nullable=False)

    is_used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        doc="Consumed by an idea-generation kickoff",
    )

    video = relationship("VideoModel", back_populates="comments")
