"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: ideaforge.configs, ideaforge.application, ideaforge.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ideaforge.application.services import IdeaCoordinator
from ideaforge.boundary.crew import CrewJobClient
from ideaforge.boundary.db import get_async_db
from ideaforge.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._crew_client = None

    @property
    def crew_client(self) -> CrewJobClient:
        """Get cached remote job client (shares one connection pool)."""
        if self._crew_client is None:
            self._crew_client = CrewJobClient(get_settings().crew)
        return self._crew_client

    async def aclose(self) -> None:
        """Close cached clients that hold network resources."""
        if self._crew_client is not None:
            await self._crew_client.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._crew_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_crew_client() -> CrewJobClient:
    """
    Get remote job client.

    Returns:
        CrewJobClient: Client configured from CREWAI_* settings
    """
    return get_service_cache().crew_client


def get_idea_coordinator(
    db: AsyncSession = Depends(get_async_db),
    crew_client: CrewJobClient = Depends(get_crew_client),
    settings: Settings = Depends(get_settings_dependency),
) -> IdeaCoordinator:
    """
    Get idea coordinator instance.

    Args:
        db: Async database session (injected via Depends)
        crew_client: Remote job client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        IdeaCoordinator: Coordinator bound to the request's session
    """
    return IdeaCoordinator(
        db=db,
        crew_client=crew_client,
        batch_size=settings.ideas.batch_size,
    )
