"""
Client for the remote idea-generation service.

Wraps the CrewAI-style deployment API: POST /kickoff starts a job and
GET /status/{kickoff_id} reports its state and result. Every request
carries the bearer token; failures are translated into
RemoteSubmissionFailed / RemoteStatusFailed.

Dependencies: httpx, pydantic, ideaforge.configs, ideaforge.models
System role: Remote job client used by the idea coordinator
"""

import hashlib
import logging
from collections.abc import Iterable
from uuid import UUID

import httpx
from pydantic import ValidationError

from ideaforge.configs.crew import CrewSettings
from ideaforge.core.exceptions import RemoteStatusFailed, RemoteSubmissionFailed
from ideaforge.models.crew import (
    KickoffInputs,
    KickoffRequest,
    KickoffResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)


def idempotency_key(comment_ids: Iterable[UUID]) -> str:
    """
    Derive a stable key for a kickoff batch from its comment ids.

    Args:
        comment_ids: Comments in the batch (order does not matter)

    Returns:
        str: Hex SHA-256 of the sorted ids
    """
    joined = ",".join(sorted(str(comment_id) for comment_id in comment_ids))
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


class CrewJobClient:
    """Async HTTP client for the kickoff/status endpoints."""

    def __init__(
        self,
        settings: CrewSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Base URL, bearer token and timeout for the service
            http_client: Pre-built AsyncClient (tests inject a MockTransport);
                built from settings when omitted
        """
        self._settings = settings
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
        )
        self._headers = {
            "Authorization": f"Bearer {settings.bearer_token}",
            "Accept": "application/json",
        }

    async def __aenter__(self) -> "CrewJobClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def kickoff(self, comments_json: str, idempotency: str | None = None) -> str:
        """
        Submit a comment batch for idea generation.

        Args:
            comments_json: JSON string of the comment batch
            idempotency: Optional Idempotency-Key header value

        Returns:
            str: Remote kickoff id

        Raises:
            RemoteSubmissionFailed: Transport error, non-2xx response, or a
                body without kickoff_id
        """
        body = KickoffRequest(inputs=KickoffInputs(comments=comments_json))
        headers = dict(self._headers)
        if idempotency:
            headers["Idempotency-Key"] = idempotency

        try:
            response = await self._http.post(
                f"{self._settings.base_url}/kickoff",
                json=body.model_dump(),
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error(
                "Kickoff request failed",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise RemoteSubmissionFailed(
                "Failed to initiate job with CrewAI",
                details={"error": str(e)},
            ) from e

        if not response.is_success:
            logger.error(
                "Kickoff rejected",
                extra={"status_code": response.status_code, "body": response.text[:500]},
            )
            raise RemoteSubmissionFailed(
                "Failed to initiate job with CrewAI",
                status_code=response.status_code,
            )

        try:
            kickoff = KickoffResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteSubmissionFailed(
                "Kickoff response did not include a kickoff_id",
                status_code=response.status_code,
                details={"error": str(e)},
            ) from e

        logger.info("Kickoff accepted", extra={"kickoff_id": kickoff.kickoff_id})
        return kickoff.kickoff_id

    async def get_status(self, kickoff_id: str) -> StatusResponse:
        """
        Poll the current state of a kickoff.

        Args:
            kickoff_id: Remote job identifier

        Returns:
            StatusResponse: state plus raw result (JSON string on SUCCESS)

        Raises:
            RemoteStatusFailed: Transport error, non-2xx response, or a body
                without state
        """
        try:
            response = await self._http.get(
                f"{self._settings.base_url}/status/{kickoff_id}",
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            raise RemoteStatusFailed(
                f"Failed to fetch job status from CrewAI for job {kickoff_id}",
                kickoff_id,
                details={"error": str(e)},
            ) from e

        if not response.is_success:
            raise RemoteStatusFailed(
                f"Failed to fetch job status from CrewAI for job {kickoff_id}",
                kickoff_id,
                status_code=response.status_code,
            )

        try:
            status = StatusResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteStatusFailed(
                f"Status response for job {kickoff_id} did not include a state",
                kickoff_id,
                status_code=response.status_code,
                details={"error": str(e)},
            ) from e

        logger.debug("Job status received", extra={"kickoff_id": kickoff_id, "state": status.state})
        return status
