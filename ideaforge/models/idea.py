"""
Idea domain models and schemas.

Result entries parsed from a finished job, plus idea API responses.

Dependencies: pydantic
System role: Idea contracts for reconciliation and the HTTP API
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResearchLink(BaseModel):
    """Supporting research reference attached to a generated idea."""

    model_config = ConfigDict(extra="ignore")

    url: str


class IdeaResultEntry(BaseModel):
    """One idea as returned in a SUCCESS job result."""

    model_config = ConfigDict(extra="ignore")

    video_id: uuid.UUID
    comment_id: uuid.UUID
    description: str
    video_title: str = ""
    score: float = 0
    research: list[ResearchLink] = Field(default_factory=list)

    @field_validator("score", mode="before")
    @classmethod
    def default_score(cls, value):
        """Absent or null score becomes 0."""
        return 0 if value is None else value

    @field_validator("research", mode="before")
    @classmethod
    def default_research(cls, value):
        """Absent or null research becomes an empty list."""
        return [] if value is None else value

    @property
    def research_urls(self) -> list[str]:
        """Research links flattened to plain URLs."""
        return [link.url for link in self.research]


class IdeaResponse(BaseModel):
    """Response schema for a stored idea."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    video_id: uuid.UUID
    comment_id: uuid.UUID
    video_title: str
    score: float
    description: str
    research: list[str]
    created_at: datetime


class IdeaDetailResponse(BaseModel):
    """Display strings for an idea's source video and comment."""

    video_title: str
    comment_text: str
