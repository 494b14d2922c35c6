"""
MCP Stdio-to-HTTP Bridge

Reads line-delimited JSON-RPC messages from stdin, POSTs each one to a
remote MCP endpoint, and writes the JSON (or SSE-carried) responses to
stdout. Exits once stdin is closed and every request has completed.
"""

from archon_bridge.bridge.decoder import decode_response, parse_sse
from archon_bridge.bridge.dispatcher import RequestDispatcher
from archon_bridge.bridge.framer import LineFramer
from archon_bridge.bridge.lifecycle import LifecycleController
from archon_bridge.bridge.runner import Bridge, serve_stdio
from archon_bridge.bridge.state import SessionState
from archon_bridge.bridge.writer import OutputWriter

__all__ = [
    "Bridge",
    "LifecycleController",
    "LineFramer",
    "OutputWriter",
    "RequestDispatcher",
    "SessionState",
    "decode_response",
    "parse_sse",
    "serve_stdio",
]
