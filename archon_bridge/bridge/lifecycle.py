"""
Lifecycle Controller

Ends the bridge run once stdin is closed and every dispatched request has
completed. There is no watchdog: a request that never completes keeps the
bridge alive until a signal arrives.
"""

import asyncio
from typing import Optional

from archon_bridge.bridge.state import SessionState
from archon_bridge.configs import get_logger

logger = get_logger("lifecycle")


class LifecycleController:
    """
    Watch SessionState and signal termination.

    Usage:
        lifecycle = LifecycleController(state)
        ...
        exit_code = await lifecycle.wait()
    """

    def __init__(self, state: SessionState):
        self.state = state
        self._terminated = asyncio.Event()
        self._exit_code: Optional[int] = None

    @property
    def terminated(self) -> bool:
        return self._terminated.is_set()

    @property
    def exit_code(self) -> Optional[int]:
        return self._exit_code

    def input_ended(self) -> None:
        """Stdin reached end-of-data."""
        if not self.state.input_closed:
            logger.debug(f"Input closed with {self.state.pending_count} request(s) pending")
        self.state.close_input()
        self.check()

    def request_completed(self) -> None:
        """A dispatched request finished (success or failure)."""
        self.check()

    def check(self) -> None:
        if self.state.drained:
            self.terminate(0)

    def terminate(self, exit_code: int = 0) -> None:
        """Move to the terminated state; only the first call has effect."""
        if self._terminated.is_set():
            return
        self._exit_code = exit_code
        self._terminated.set()
        logger.debug(f"Bridge terminating with status {exit_code}")

    async def wait(self) -> int:
        await self._terminated.wait()
        return self._exit_code or 0
