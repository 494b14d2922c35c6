"""
Response Decoder

Turns an upstream HTTP response body into the ordered list of JSON events
to write back to the client. The body is fully buffered before decoding.
"""

import json
from typing import Any

from archon_bridge.configs.constants import EVENT_STREAM_CONTENT_TYPE, SSE_DATA_PREFIX


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """
    Parse a standard JSON value.

    NaN, Infinity and -Infinity are rejected; Python's json accepts them
    but they are not JSON.

    Raises:
        ValueError: Text is not valid JSON (JSONDecodeError included)
        RecursionError: Value is nested too deeply to parse
    """
    return json.loads(text, parse_constant=_reject_constant)


def _try_loads(text: str) -> tuple[bool, Any]:
    try:
        return True, loads_strict(text)
    except (ValueError, RecursionError):
        return False, None


def parse_sse(body: str) -> list[Any]:
    """
    Extract JSON payloads from a server-sent-event body.

    Only lines starting with "data: " are considered; payloads that fail to
    parse are skipped.

    Args:
        body: Full event-stream body

    Returns:
        Parsed payloads in stream order
    """
    events = []
    for line in body.split("\n"):
        if not line.startswith(SSE_DATA_PREFIX):
            continue
        ok, event = _try_loads(line[len(SSE_DATA_PREFIX):])
        if ok:
            events.append(event)
    return events


def decode_response(content_type: str | None, body: str) -> list[Any]:
    """
    Decode a response body into zero or more JSON events.

    Args:
        content_type: Value of the Content-Type response header, if any
        body: Response body text

    Returns:
        [] for an empty or unparseable body, the SSE payloads for an
        event stream, otherwise a single-element list
    """
    if not body.strip():
        return []

    if EVENT_STREAM_CONTENT_TYPE in (content_type or "").lower():
        return parse_sse(body)

    ok, event = _try_loads(body)
    return [event] if ok else []
