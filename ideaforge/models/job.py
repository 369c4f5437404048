"""
Job domain models and schemas.

Response schemas for kickoff, reconciliation and pending checks.

Dependencies: pydantic
System role: Job status API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class JobResponse(BaseModel):
    """Response schema for a submitted idea-generation job."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    kickoff_id: str
    job_state: str
    processed: bool
    created_at: datetime
    updated_at: datetime


class ReconcileSummary(BaseModel):
    """Outcome of one reconciliation pass."""

    jobs_checked: int = Field(default=0, description="Non-terminal jobs polled")
    jobs_completed: int = Field(default=0, description="Jobs whose ideas were stored")
    ideas_created: int = Field(default=0, description="Idea rows inserted")
    jobs_failed: int = Field(default=0, description="Jobs whose reconciliation raised")


class PendingResponse(BaseModel):
    """Whether the user has jobs still in flight."""

    has_pending: bool
