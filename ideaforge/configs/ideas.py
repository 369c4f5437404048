"""
Idea generation settings.

Batch sizing for kickoff and the polling cadence used by the worker beat.

Dependencies: pydantic, pydantic_settings
System role: Job coordinator tuning
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdeaSettings(BaseSettings):
    """Job coordinator tuning knobs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IDEAS_",
        case_sensitive=False,
        extra="ignore",
    )

    batch_size: int = Field(
        default=50,
        ge=1,
        description="Maximum number of unused comments submitted per kickoff",
    )
    reconcile_interval_seconds: int = Field(
        default=60,
        ge=5,
        description="Beat interval for the reconcile-all-pending task",
    )
