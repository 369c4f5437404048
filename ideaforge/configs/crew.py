"""
Remote idea-generation service settings.

Base URL and bearer token for the CrewAI-style kickoff/status API.
Both are required: a missing value fails settings validation at startup.

Dependencies: pydantic, pydantic_settings
System role: Remote job client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrewSettings(BaseSettings):
    """Connection settings for the remote job-execution service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CREWAI_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(description="Base URL of the crew deployment, without trailing slash")
    bearer_token: str = Field(description="Bearer token sent on every request")
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    @property
    def base_url(self) -> str:
        """Base URL normalised without a trailing slash."""
        return self.url.rstrip("/")
