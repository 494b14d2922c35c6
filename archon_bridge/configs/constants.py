"""
Archon Bridge Constants

Static values for the upstream HTTP contract and stdio framing.
"""

# --- Upstream Endpoint ---

DEFAULT_ENDPOINT = "https://archon.technology/mcp"
SUPPORTED_SCHEMES = ("http", "https")

# --- HTTP Headers ---

SESSION_HEADER = "Mcp-Session-Id"
JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"
ACCEPT_HEADER_VALUE = f"{JSON_CONTENT_TYPE}, {EVENT_STREAM_CONTENT_TYPE}"

# --- SSE ---

SSE_DATA_PREFIX = "data: "

# --- Stdio ---

READ_CHUNK_SIZE = 64 * 1024  # bytes per stdin read

# --- Timeout Configuration ---
# None means wait forever; a hung upstream call then blocks shutdown.

TIMEOUTS = {
    "http_request": None,
}


def get_timeout(key: str, default: float | None = None) -> float | None:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout in seconds, or None for no timeout
    """
    return TIMEOUTS.get(key, default)
