"""
Remote job service wire schemas.

Request and response bodies of the kickoff/status endpoints.

Dependencies: pydantic
System role: Remote job client contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class KickoffInputs(BaseModel):
    """Inputs block of a kickoff request."""

    comments: str = Field(description="JSON-encoded comment batch")


class KickoffRequest(BaseModel):
    """Body of POST /kickoff."""

    inputs: KickoffInputs


class KickoffResponse(BaseModel):
    """Body returned by POST /kickoff."""

    model_config = ConfigDict(extra="ignore")

    kickoff_id: str = Field(min_length=1)


class StatusResponse(BaseModel):
    """Body returned by GET /status/{kickoff_id}."""

    model_config = ConfigDict(extra="ignore")

    state: str = Field(min_length=1)
    result: Any = None
