"""
Idea error handling utilities.

Provides a decorator that maps domain exceptions raised by the
coordinator onto HTTPExceptions with consistent status codes.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from ideaforge.core.exceptions import (
    MalformedResult,
    NoInputAvailable,
    RemoteJobError,
    Unauthenticated,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_idea_errors(func: F) -> F:
    """
    Decorator to handle idea-related errors and transform them into HTTPExceptions.

    Mapping:
    - Unauthenticated -> 401
    - NoInputAvailable -> 409
    - RemoteSubmissionFailed, RemoteStatusFailed, MalformedResult -> 502
    - anything else -> 500 with a generic message
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except Unauthenticated as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.message,
            )

        except NoInputAvailable as e:
            logger.info("Kickoff skipped, no unused comments", extra=e.details)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=e.message,
            )

        except (RemoteJobError, MalformedResult) as e:
            logger.warning(
                "Remote job service failure",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in idea operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
