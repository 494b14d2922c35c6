"""
Archon Bridge Exception Hierarchy

Centralized exception classes for structured error handling across the bridge.
All bridge-specific exceptions inherit from BridgeError.

Usage:
    from archon_bridge.exceptions import BridgeError, TransportError

    try:
        response = await post_json(client, url, payload, headers)
    except TransportError as e:
        logger.error(f"Error: {e}")
"""


class BridgeError(Exception):
    """Base exception for all bridge errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(BridgeError):
    """Error in bridge configuration."""

    pass


class InvalidEndpointError(ConfigurationError):
    """Upstream endpoint URL is malformed or uses an unsupported scheme."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url} if url else None)
        self.url = url


# =============================================================================
# Protocol Errors
# =============================================================================


class ProtocolError(BridgeError):
    """Base class for stdio protocol errors."""

    pass


class InvalidRequestLineError(ProtocolError):
    """An input line is not a valid JSON value."""

    def __init__(self, message: str, line: str | None = None):
        details = {"line": line[:200]} if line else None
        super().__init__(message, details)
        self.line = line


class SessionStateError(BridgeError):
    """Session state was driven through an impossible transition."""

    pass


# =============================================================================
# HTTP/Transport Errors
# =============================================================================


class TransportError(BridgeError):
    """Base class for upstream HTTP transport errors."""

    pass


class HTTPConnectionError(TransportError):
    """Failed to connect to the upstream endpoint."""

    pass


class HTTPTimeoutError(TransportError):
    """Upstream request timed out."""

    pass


class HTTPProtocolError(TransportError):
    """Upstream sent a malformed low-level HTTP response."""

    pass
