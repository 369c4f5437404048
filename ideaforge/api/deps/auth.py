"""
Caller identity dependency.

The upstream auth gateway authenticates the user and forwards the
identity in the X-User-Id header. No session handling happens here.

Dependencies: fastapi
System role: Identity extraction for coordinator calls
"""

from fastapi import Header

USER_ID_HEADER = "X-User-Id"


async def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER),
) -> str | None:
    """
    Read the caller's user id from the gateway header.

    Returns None when the header is missing or blank; the coordinator
    turns that into Unauthenticated.
    """
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()
