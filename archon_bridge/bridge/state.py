"""
Session State

The small mutable record shared by the dispatcher and the lifecycle
controller. Only touched from the event-loop thread, so it carries no lock.
"""

from dataclasses import dataclass
from typing import Optional

from archon_bridge.exceptions import SessionStateError


@dataclass
class SessionState:
    """Per-run bridge state.

    Attributes:
        affinity_token: Last Mcp-Session-Id seen from the remote, never cleared
        pending_count: Requests dispatched but not yet completed
        input_closed: True once stdin reached end-of-data
    """

    affinity_token: Optional[str] = None
    pending_count: int = 0
    input_closed: bool = False

    def request_started(self) -> None:
        self.pending_count += 1

    def request_finished(self) -> None:
        if self.pending_count <= 0:
            raise SessionStateError("Request completed with no request pending")
        self.pending_count -= 1

    def update_affinity(self, token: Optional[str]) -> None:
        """Record a session token from a response; absent values keep the old one."""
        if token:
            self.affinity_token = token

    def close_input(self) -> None:
        self.input_closed = True

    @property
    def drained(self) -> bool:
        return self.input_closed and self.pending_count == 0
