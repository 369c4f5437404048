"""
Remote job lifecycle states.

The provider controls transitions (PENDING -> STARTED -> RUNNING ->
SUCCESS | FAILURE). Unknown values are stored as-is and treated as
terminal for polling purposes.

Dependencies: enum (stdlib)
System role: Job state vocabulary shared by persistence and coordinator
"""

import enum


class JobState(str, enum.Enum):
    """Known remote job states."""

    PENDING = "PENDING"
    STARTED = "STARTED"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


NON_TERMINAL_STATES: tuple[str, ...] = (
    JobState.PENDING.value,
    JobState.STARTED.value,
    JobState.RUNNING.value,
)


def is_terminal(state: str) -> bool:
    """Return True when a job in ``state`` should no longer be polled."""
    return state not in NON_TERMINAL_STATES
