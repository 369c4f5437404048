"""
Celery configuration settings.

Manages Celery broker and result backend configuration for the
reconciliation worker.

Dependencies: pydantic, pydantic_settings
System role: Task queue configuration for scheduled job polling
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CelerySettings(BaseSettings):
    """Celery broker and result backend configuration (Redis)."""

    model_config = SettingsConfigDict(
        env_prefix="CELERY_",
        case_sensitive=False,
        extra="ignore",
    )

    broker_url: str = Field(
        default="redis://localhost:6379/0",
        description="Celery broker URL",
    )
    result_backend_url: str = Field(
        default="redis://localhost:6379/1",
        description="Celery result backend URL",
    )
    task_serializer: str = Field(default="json", description="Task serialization format")
    result_serializer: str = Field(default="json", description="Result serialization format")
    accept_content: list[str] = Field(
        default=["json"],
        description="Accepted content types",
    )
    timezone: str = Field(default="UTC", description="Celery timezone")
