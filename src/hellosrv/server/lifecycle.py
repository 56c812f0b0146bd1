"""Listener lifecycle.

    STARTING ──bind ok──▶ LISTENING ──stop──▶ TERMINATED
        │
        └──bind error──▶ FAILED

Request handling never moves the state.
"""

from __future__ import annotations

from enum import StrEnum


class ServerState(StrEnum):
    """Where a :class:`~hellosrv.server.listener.HelloServer` is in its life."""

    STARTING = "starting"
    LISTENING = "listening"
    TERMINATED = "terminated"
    FAILED = "failed"


SERVER_TRANSITIONS: dict[str, list[str]] = {
    "starting": ["listening", "failed"],
    "listening": ["terminated"],
    "terminated": [],
    "failed": [],
}


def is_valid_transition(current: str, target: str) -> bool:
    """Check if moving from *current* to *target* is allowed."""
    return target in SERVER_TRANSITIONS.get(current, [])


def is_final(state: str) -> bool:
    """TERMINATED and FAILED have no way out."""
    return not SERVER_TRANSITIONS.get(state, [])
