"""
Tests for the upstream HTTP helper and its error mapping.
"""

import asyncio
import json

import httpx
import pytest

from archon_bridge.exceptions import HTTPConnectionError, HTTPProtocolError, HTTPTimeoutError, TransportError
from archon_bridge.utils.http_client import create_client, post_json

URL = "http://bridge.test/mcp"


def post_with(handler, payload=None):
    async def scenario():
        async with create_client(transport=httpx.MockTransport(handler)) as client:
            return await post_json(client, URL, payload or {"id": 1}, {"Content-Type": "application/json"})

    return asyncio.run(scenario())


class TestPostJson:
    """Tests for post_json."""

    def test_returns_response_with_body(self):
        """The response comes back read, whatever the status."""

        def handler(request):
            assert json.loads(request.content) == {"id": 1}
            return httpx.Response(500, json={"error": "boom"})

        response = post_with(handler)

        assert response.status_code == 500
        assert response.json() == {"error": "boom"}

    @pytest.mark.parametrize(
        "raised, expected",
        [
            (httpx.ConnectError, HTTPConnectionError),
            (httpx.ConnectTimeout, HTTPTimeoutError),
            (httpx.ReadTimeout, HTTPTimeoutError),
            (httpx.RemoteProtocolError, HTTPProtocolError),
            (httpx.ReadError, TransportError),
        ],
    )
    def test_error_mapping(self, raised, expected):
        """httpx transport failures become TransportError subclasses."""

        def handler(request):
            raise raised("upstream failure", request=request)

        with pytest.raises(expected) as exc_info:
            post_with(handler)
        assert "upstream failure" in str(exc_info.value)
        assert isinstance(exc_info.value, TransportError)


class TestCreateClient:
    """Tests for create_client."""

    def test_no_timeout_by_default(self):
        client = create_client()
        try:
            assert client.timeout.read is None
            assert client.timeout.connect is None
        finally:
            asyncio.run(client.aclose())

    def test_timeout_applies(self):
        client = create_client(timeout=3.0)
        try:
            assert client.timeout.read == 3.0
        finally:
            asyncio.run(client.aclose())
