"""
Archon Bridge - stdio-to-HTTP bridge for remote MCP servers.

Lets a local tool host that speaks line-delimited JSON over stdio talk to a
remote MCP endpoint that only speaks HTTP (plain JSON or SSE responses).
"""

__version__ = "0.1.0"
