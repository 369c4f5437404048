"""API-specific dependencies."""

# Re-export common dependencies
from .auth import get_current_user_id
from .dependencies import (
    get_crew_client,
    get_idea_coordinator,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_crew_client",
    "get_current_user_id",
    "get_idea_coordinator",
    "get_service_cache",
    "get_settings_dependency",
]
