"""
Idea ORM model.

One generated content suggestion. Rows are created only by reconciling
a SUCCESS job and are never updated afterwards.

Dependencies: sqlalchemy, ideaforge.boundary.db.base
System role: Generated idea persistence
"""

from uuid import UUID

from sqlalchemy import JSON, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ideaforge.boundary.db.base import Base, OwnedMixin, TimestampMixin, UUIDMixin


class IdeaModel(Base, UUIDMixin, TimestampMixin, OwnedMixin):
    """
    Idea ORM model.

    video_id and comment_id come from the remote result and are not
    foreign keys; they may point at rows that no longer exist.

    Attributes:
        id: UUID primary key
        user_id: Owning user
        video_id: Source video
        comment_id: Source comment
        video_title: Video title echoed by the generator
        score: Generator's score (0 when omitted)
        description: Idea text
        research: Supporting research URLs
    """

    __tablename__ = "ideas"

    video_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    comment_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    video_title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    research: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Research URLs backing the idea",
    )
