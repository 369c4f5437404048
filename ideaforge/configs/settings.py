"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from ideaforge.configs.base import BaseSettings
from ideaforge.configs.celery_config import CelerySettings
from ideaforge.configs.crew import CrewSettings
from ideaforge.configs.database import DatabaseSettings
from ideaforge.configs.ideas import IdeaSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Sub-settings load lazily so a missing CREWAI_* value surfaces when
    # Settings() is built, not at import time.
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    crew: CrewSettings = Field(default_factory=CrewSettings)
    ideas: IdeaSettings = Field(default_factory=IdeaSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        pydantic.ValidationError: If required settings (CREWAI_URL,
            CREWAI_BEARER_TOKEN) are missing

    Usage:
        from ideaforge.configs import get_settings
        settings = get_settings()
    """
    return Settings()
