"""
Bridge Runner

Wires the framer, dispatcher, writer and lifecycle controller to a byte
stream reader and a text output stream, and runs until the lifecycle
controller reports termination.
"""

import asyncio
import codecs
import contextlib
import signal
import sys
from typing import Optional, TextIO

import httpx

from archon_bridge.bridge.dispatcher import RequestDispatcher
from archon_bridge.bridge.framer import LineFramer
from archon_bridge.bridge.lifecycle import LifecycleController
from archon_bridge.bridge.state import SessionState
from archon_bridge.bridge.writer import OutputWriter
from archon_bridge.configs import get_logger
from archon_bridge.configs.constants import READ_CHUNK_SIZE
from archon_bridge.configs.runtime import BridgeConfig
from archon_bridge.utils.http_client import create_client

logger = get_logger("runner")


class Bridge:
    """
    One bridge run: session state plus the components that share it.

    Usage:
        bridge = Bridge(config, sys.stdout, client)
        exit_code = await bridge.run(reader)
    """

    def __init__(self, config: BridgeConfig, output: TextIO, client: httpx.AsyncClient):
        self.config = config
        self.state = SessionState()
        self.lifecycle = LifecycleController(self.state)
        self.writer = OutputWriter(output)
        self.dispatcher = RequestDispatcher(config, self.state, self.writer, self.lifecycle, client)
        self.framer = LineFramer(self._handle_line)

    def _handle_line(self, line: str) -> None:
        try:
            self.dispatcher.submit(line)
        except Exception as e:
            logger.exception(f"Error: failed to dispatch line: {e}")

    async def pump_input(self, reader: asyncio.StreamReader) -> None:
        """Read chunks until EOF, framing them into request lines."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            while True:
                chunk = await reader.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                self.framer.feed(decoder.decode(chunk))
        except OSError as e:
            logger.error(f"Error: reading input failed: {e}")
        self.framer.feed(decoder.decode(b"", final=True))
        self.framer.close()
        self.lifecycle.input_ended()

    async def run(self, reader: asyncio.StreamReader) -> int:
        """Run until input is drained or terminate() is called."""
        input_task = asyncio.create_task(self.pump_input(reader))
        try:
            return await self.lifecycle.wait()
        finally:
            await self.cancel_pending(input_task)

    async def cancel_pending(self, *extra: asyncio.Task) -> None:
        """Cancel input reading and in-flight requests after termination."""
        tasks = [*extra, *self.dispatcher.pending_tasks()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def terminate(self, exit_code: int = 0) -> None:
        self.lifecycle.terminate(exit_code)


async def open_stdin_reader() -> asyncio.StreamReader:
    """Expose stdin as an asyncio StreamReader."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    try:
        await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin.buffer)
    except ValueError:
        # Regular files can't be attached as pipes; they never block, so read them up front
        reader.feed_data(await asyncio.to_thread(sys.stdin.buffer.read))
        reader.feed_eof()
    return reader


async def serve_stdio(config: BridgeConfig, client: Optional[httpx.AsyncClient] = None) -> int:
    """
    Run the bridge on the process's stdin/stdout.

    SIGINT and SIGTERM end the run immediately with status 0, without
    waiting for in-flight requests.

    Returns:
        Process exit status
    """
    owns_client = client is None
    if client is None:
        client = create_client(timeout=config.timeout)

    bridge = Bridge(config, sys.stdout, client)
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on Windows event loops; KeyboardInterrupt covers SIGINT there
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, bridge.terminate, 0)

    try:
        reader = await open_stdin_reader()
        return await bridge.run(reader)
    finally:
        if owns_client:
            await client.aclose()
