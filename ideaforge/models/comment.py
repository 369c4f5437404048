"""
Comment batch schemas.

Shape of each comment sent to the remote idea generator.

Dependencies: pydantic
System role: Kickoff payload contract
"""

import uuid

from pydantic import BaseModel


class CommentBatchItem(BaseModel):
    """One unused comment joined with its video title."""

    title: str
    comment: str
    video_id: uuid.UUID
    comment_id: uuid.UUID
