"""
Request Dispatcher

Forwards each framed request line to the upstream endpoint as an HTTP POST
and writes the decoded response events back out.

Requests are not serialized: every line becomes its own asyncio task, so
several calls may be in flight and complete in any order. The affinity
token is last-writer-wins across concurrently completing responses.
"""

import asyncio
from typing import Any, Optional

import httpx

from archon_bridge.bridge.decoder import decode_response, loads_strict
from archon_bridge.bridge.lifecycle import LifecycleController
from archon_bridge.bridge.state import SessionState
from archon_bridge.bridge.writer import OutputWriter
from archon_bridge.configs import get_logger
from archon_bridge.configs.constants import ACCEPT_HEADER_VALUE, JSON_CONTENT_TYPE, SESSION_HEADER
from archon_bridge.configs.runtime import BridgeConfig
from archon_bridge.exceptions import InvalidRequestLineError, TransportError
from archon_bridge.utils.http_client import post_json

logger = get_logger("dispatcher")


def parse_request_line(line: str) -> Any:
    """
    Parse one input line as a JSON value.

    Raises:
        InvalidRequestLineError: Line is not valid JSON
    """
    try:
        return loads_strict(line)
    except (ValueError, RecursionError) as e:
        raise InvalidRequestLineError(str(e), line=line) from e


class RequestDispatcher:
    """
    Owns the upstream call for every request line.

    Usage:
        dispatcher = RequestDispatcher(config, state, writer, lifecycle, client)
        framer = LineFramer(dispatcher.submit)
    """

    def __init__(
        self,
        config: BridgeConfig,
        state: SessionState,
        writer: OutputWriter,
        lifecycle: LifecycleController,
        client: httpx.AsyncClient,
    ):
        self.config = config
        self.state = state
        self.writer = writer
        self.lifecycle = lifecycle
        self.client = client
        self._tasks: set[asyncio.Task] = set()

    def build_headers(self) -> dict[str, str]:
        headers = dict(self.config.headers)
        headers["Content-Type"] = JSON_CONTENT_TYPE
        headers["Accept"] = ACCEPT_HEADER_VALUE
        if self.state.affinity_token:
            headers[SESSION_HEADER] = self.state.affinity_token
        return headers

    def submit(self, line: str) -> Optional[asyncio.Task]:
        """
        Handle one framed line.

        Runs synchronously up to scheduling the upstream call, so the pending
        count is already raised when the caller goes on to read more input.

        Returns:
            The scheduled task, or None if the line was rejected
        """
        try:
            request = parse_request_line(line)
        except InvalidRequestLineError as e:
            logger.error(f"Error: invalid JSON on input: {e}")
            self.lifecycle.check()
            return None

        self.state.request_started()
        coro = self.forward(request)
        try:
            task = asyncio.create_task(coro)
        except Exception:
            # Undo the increment so a failed schedule can't block draining
            coro.close()
            self.state.request_finished()
            self.lifecycle.request_completed()
            raise
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def forward(self, request: Any) -> None:
        """Send one request upstream and emit its events; never raises."""
        try:
            response = await post_json(
                self.client,
                self.config.endpoint,
                request,
                headers=self.build_headers(),
            )
            self.state.update_affinity(response.headers.get(SESSION_HEADER))

            if response.status_code >= 400:
                logger.warning(f"Upstream returned HTTP {response.status_code}")

            events = decode_response(response.headers.get("content-type"), response.text)
            self.writer.write_events(events)
            logger.debug(f"Forwarded request, {len(events)} event(s) returned")
        except TransportError as e:
            logger.error(f"Error: {e}")
        except Exception as e:
            logger.exception(f"Error: unexpected failure handling request: {e}")
        finally:
            self.state.request_finished()
            self.lifecycle.request_completed()

    def pending_tasks(self) -> list[asyncio.Task]:
        return [task for task in self._tasks if not task.done()]
