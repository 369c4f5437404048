"""Remote job service boundary."""

from ideaforge.boundary.crew.crew_client import CrewJobClient, idempotency_key

__all__ = ["CrewJobClient", "idempotency_key"]
