"""
Upstream HTTP Client Utilities

Async POST helper for forwarding requests to the remote MCP endpoint.
Uses `httpx` with standardized error handling: low-level httpx failures are
re-raised as TransportError subclasses so callers only catch one hierarchy.

Usage:
    from archon_bridge.utils.http_client import create_client, post_json

    async with create_client(timeout=None) as client:
        response = await post_json(client, url, {"jsonrpc": "2.0"}, headers)
"""

import json
from typing import Any, Optional

import httpx

from archon_bridge.exceptions import HTTPConnectionError, HTTPProtocolError, HTTPTimeoutError, TransportError


def create_client(
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Build the shared AsyncClient for a bridge run.

    Args:
        timeout: Request timeout in seconds, None to wait forever
        transport: Optional transport override (tests pass httpx.MockTransport)

    Returns:
        httpx.AsyncClient; the caller owns closing it
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    payload: Any,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """
    POST a JSON payload and read the full response body.

    The status code is not checked; MCP servers return JSON-RPC errors in
    the body and the caller forwards them either way.

    Args:
        client: Shared AsyncClient
        url: Endpoint URL
        payload: JSON-serializable request body
        headers: Request headers

    Returns:
        httpx.Response with its body already read

    Raises:
        HTTPConnectionError: Connection failed
        HTTPTimeoutError: Request timed out
        HTTPProtocolError: Malformed response at the HTTP level
        TransportError: Any other transport failure
    """
    body = json.dumps(payload).encode("utf-8")
    try:
        return await client.post(url, content=body, headers=headers)
    except httpx.TimeoutException as e:
        raise HTTPTimeoutError(f"Request timed out: {str(e) or url}") from e
    except httpx.ConnectError as e:
        raise HTTPConnectionError(f"Connection failed: {str(e) or url}") from e
    except (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError) as e:
        raise HTTPProtocolError(f"Malformed response: {e}") from e
    except httpx.TransportError as e:
        raise TransportError(f"Transport error: {e}") from e
