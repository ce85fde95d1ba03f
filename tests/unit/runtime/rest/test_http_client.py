"""Precise unit tests for HTTPClient.

Tests focus on session management, status mapping and body decoding.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from itwin.validation.core import ProtocolError, RateLimitError, TransportError
from itwin.validation.runtime.rest import HTTPClient


def mock_response(status: int = 200, body: str | bytes = "", headers: dict | None = None):
    raw = body.encode() if isinstance(body, str) else body
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    response.read = AsyncMock(return_value=raw)
    response.text = AsyncMock(return_value=raw.decode("utf-8", errors="replace"))
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def client_with(response) -> HTTPClient:
    client = HTTPClient()
    session = MagicMock()
    session.closed = False  # session property checks this
    session.request = MagicMock(return_value=response)
    client._session = session
    return client


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        assert isinstance(session1, aiohttp.ClientSession)
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test request dispatch and response decoding."""

    @pytest.mark.asyncio
    async def test_get_decodes_json(self):
        client = client_with(mock_response(200, '{"rules": []}'))

        result = await client.get("https://api.example.com/rules", headers={"A": "b"})

        assert result == {"rules": []}
        client._session.request.assert_called_once_with(
            "GET", "https://api.example.com/rules", json=None, headers={"A": "b"}
        )

    @pytest.mark.asyncio
    async def test_post_and_put_send_json(self):
        client = client_with(mock_response(201, '{"rule": {"id": "r1"}}'))

        await client.post("https://api.example.com/rules", json={"a": 1})
        await client.put("https://api.example.com/rules/r1", json={"b": 2})

        calls = client._session.request.call_args_list
        assert calls[0].args == ("POST", "https://api.example.com/rules")
        assert calls[0].kwargs["json"] == {"a": 1}
        assert calls[1].args == ("PUT", "https://api.example.com/rules/r1")

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self):
        client = client_with(mock_response(204, ""))

        assert await client.delete("https://api.example.com/rules/r1") is None

    @pytest.mark.asyncio
    async def test_relative_url_uses_base_url(self):
        client = client_with(mock_response(200, "{}"))
        client.base_url = "https://api.example.com"

        await client.get("/rules")

        assert client._session.request.call_args.args[1] == "https://api.example.com/rules"

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(self):
        client = client_with(mock_response(404, '{"error": {"code": "RuleNotFound"}}'))

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/rules/x")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://api.example.com/rules/x"
        assert "RuleNotFound" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_rate_limit_status(self):
        client = client_with(mock_response(429, "", headers={"Retry-After": "12"}))

        with pytest.raises(RateLimitError) as exc_info:
            await client.get("https://api.example.com/rules")

        assert exc_info.value.retry_after == 12
        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_network_failure_raises_transport_error(self):
        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/rules")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.request = MagicMock(side_effect=asyncio.TimeoutError())
        client._session = session

        with pytest.raises(TransportError):
            await client.get("https://api.example.com/rules")

    @pytest.mark.asyncio
    async def test_invalid_json_is_protocol_error(self):
        client = client_with(mock_response(200, "<html>"))

        with pytest.raises(ProtocolError):
            await client.get("https://api.example.com/rules")

    @pytest.mark.asyncio
    async def test_non_utf8_success_body_is_protocol_error(self):
        client = client_with(mock_response(200, b'{"x": "\xff\xfe"}'))

        with pytest.raises(ProtocolError) as exc_info:
            await client.get("https://api.example.com/rules")

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_non_utf8_error_body_keeps_status(self):
        response = mock_response(503, b"\xff\xfe oops")
        client = client_with(response)

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/rules")

        assert exc_info.value.status_code == 503
        assert "oops" in str(exc_info.value)
        response.text.assert_called_once_with(errors="replace")
