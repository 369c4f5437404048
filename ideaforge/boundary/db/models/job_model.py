"""
Job ORM model.

Tracks one remote idea-generation run from kickoff to reconciliation.

Dependencies: sqlalchemy, ideaforge.boundary.db.base
System role: Remote job tracking
"""

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ideaforge.boundary.db.base import Base, OwnedMixin, TimestampMixin, UUIDMixin
from ideaforge.core.job_states import JobState


class JobModel(Base, UUIDMixin, TimestampMixin, OwnedMixin):
    """
    Crew job ORM model linking a kickoff id to its reconciliation state.

    job_state holds whatever the provider reports; values outside the
    known JobState set are kept verbatim. processed is a one-way latch
    set together with idea insertion, so processed=True implies
    job_state == SUCCESS and the job's ideas exist.

    Attributes:
        id: UUID primary key
        user_id: Owning user
        kickoff_id: Remote job identifier (unique)
        job_state: Last observed provider state
        processed: True once ideas from this job are stored
        job_result: Raw result payload (JSON text) of a SUCCESS run

    Workflow:
        1. kickoff inserts the row with job_state=STARTED
        2. reconcile polls while job_state is PENDING/STARTED/RUNNING
        3. on SUCCESS, result + processed + ideas are written in one transaction
    """

    __tablename__ = "crew_jobs"
    __table_args__ = (
        Index("ix_crew_jobs_user_pending", "user_id", "processed", "job_state"),
    )

    kickoff_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="Remote kickoff id",
    )

    job_state: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default=JobState.STARTED.value,
    )

    processed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    job_result: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Raw JSON result of a successful run",
    )
