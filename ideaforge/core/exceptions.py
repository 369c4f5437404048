"""
Exception hierarchy for the idea generation service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class IdeaForgeException(Exception):
    """Base exception for all ideaforge application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class Unauthenticated(IdeaForgeException):
    """Raised when an operation is invoked without a user identity."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class NoInputAvailable(IdeaForgeException):
    """Raised when kickoff finds no unused comments for the user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "No unused comments found to generate ideas",
            {"user_id": user_id},
        )


class RemoteJobError(IdeaForgeException):
    """Base exception for failures talking to the remote job service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize remote job error.

        Args:
            message: Error message
            status_code: HTTP status returned by the service, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class RemoteSubmissionFailed(RemoteJobError):
    """Raised when the kickoff request fails or returns no kickoff id."""


class RemoteStatusFailed(RemoteJobError):
    """Raised when polling a kickoff's status fails."""

    def __init__(
        self,
        message: str,
        kickoff_id: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["kickoff_id"] = kickoff_id
        super().__init__(message, status_code, details)


class MalformedResult(IdeaForgeException):
    """Raised when a job result cannot be parsed into idea records."""

    def __init__(
        self,
        message: str,
        kickoff_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if kickoff_id:
            details["kickoff_id"] = kickoff_id
        super().__init__(message, details)
