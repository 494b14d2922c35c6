"""
Pytest fixtures for Archon Bridge tests.
"""

import asyncio
import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import patch

import httpx
import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

ENDPOINT = "http://bridge.test/mcp"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(temp_dir: Path) -> Generator[Path, None, None]:
    """Point the data directory at a temp dir and clear bridge env vars."""
    kept = {
        key: value
        for key, value in os.environ.items()
        if key != "MCP_URL" and not key.startswith("ARCHON_BRIDGE_")
    }
    kept["ARCHON_BRIDGE_DATA_PATH"] = str(temp_dir)
    with patch.dict(os.environ, kept, clear=True):
        yield temp_dir


@pytest.fixture
def config():
    """Bridge config pointing at the mock endpoint."""
    from archon_bridge.configs.runtime import BridgeConfig

    return BridgeConfig(endpoint=ENDPOINT)


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    """Factory for an AsyncClient whose requests are answered by a handler."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def input_reader() -> Callable[[bytes], asyncio.StreamReader]:
    """Factory for a StreamReader preloaded with bytes and closed.

    Must be called from inside a running event loop.
    """

    def _make(data: bytes) -> asyncio.StreamReader:
        reader = asyncio.StreamReader()
        if data:
            reader.feed_data(data)
        reader.feed_eof()
        return reader

    return _make


@pytest.fixture
def echo_handler() -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering each JSON-RPC request with a result echoing its id."""

    def _handle(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body.get("id"), "result": {}})

    return _handle


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so they don't leak between tests."""
    import logging

    yield
    logger = logging.getLogger("archon_bridge")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
