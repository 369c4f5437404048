"""
Serialization boundary for JSON-string payloads.

The remote service takes the comment batch as a JSON string and returns
job results as a JSON string. Both directions are validated here so
parse failures surface as MalformedResult instead of generic errors.

Dependencies: json (stdlib), pydantic, ideaforge.models
System role: Kickoff/result payload codec
"""

import json
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ideaforge.core.exceptions import MalformedResult
from ideaforge.models.comment import CommentBatchItem
from ideaforge.models.idea import IdeaResultEntry

_RESULT_ADAPTER = TypeAdapter(list[IdeaResultEntry])


def serialize_comment_batch(items: Iterable[CommentBatchItem]) -> str:
    """
    Encode a comment batch as the JSON string the kickoff endpoint expects.

    Args:
        items: Comments joined with their video titles

    Returns:
        str: JSON array of {title, comment, video_id, comment_id}
    """
    return json.dumps([item.model_dump(mode="json") for item in items])


def parse_job_result(raw: Any, kickoff_id: str | None = None) -> list[IdeaResultEntry]:
    """
    Decode a SUCCESS job result into validated idea entries.

    Accepts the JSON string the service normally sends, or an already
    decoded list.

    Args:
        raw: Result payload from the status endpoint
        kickoff_id: Remote job id, for error context

    Returns:
        list[IdeaResultEntry]: One entry per generated idea

    Raises:
        MalformedResult: If the payload is missing, not JSON, not a list,
            or an entry does not match the idea shape
    """
    if raw is None:
        raise MalformedResult("Job finished without a result payload", kickoff_id)

    decoded = raw
    if isinstance(raw, (str, bytes)):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedResult(
                "Job result is not valid JSON",
                kickoff_id,
                {"error": str(e)},
            ) from e

    if not isinstance(decoded, list):
        raise MalformedResult(
            "Job result must be a JSON array of ideas",
            kickoff_id,
            {"result_type": type(decoded).__name__},
        )

    try:
        return _RESULT_ADAPTER.validate_python(decoded)
    except ValidationError as e:
        raise MalformedResult(
            "Job result entries do not match the idea schema",
            kickoff_id,
            {"errors": e.errors(include_url=False)},
        ) from e
