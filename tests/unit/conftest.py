"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections import deque
from typing import Any

import pytest

from itwin.validation import ClientOptions, PropertyValidationClient

BASE_URL = "https://api.example.com/validation/propertyValue"
IMODELS_URL = "https://api.example.com/imodels"


class FakeTransport:
    """Transport double that records calls and replays queued responses.

    Responses are queued per URL and served in FIFO order. Queue an
    exception instance to have the call raise it.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._responses: dict[str, deque[Any]] = {}
        self.closed = False

    def queue(self, url: str, *responses: Any) -> None:
        self._responses.setdefault(url, deque()).extend(responses)

    def _reply(self, method: str, url: str, headers: dict[str, str] | None, body: Any) -> Any:
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body})
        pending = self._responses.get(url)
        if not pending:
            raise AssertionError(f"Unexpected {method} {url}")
        response = pending.popleft()
        if isinstance(response, BaseException):
            raise response
        return response

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return self._reply("GET", url, headers, None)

    async def post(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return self._reply("POST", url, headers, json_body)

    async def put(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return self._reply("PUT", url, headers, json_body)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return self._reply("DELETE", url, headers, None)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def options() -> ClientOptions:
    return ClientOptions(base_url=BASE_URL, imodels_base_url=IMODELS_URL)


@pytest.fixture
def client(transport: FakeTransport, options: ClientOptions) -> PropertyValidationClient:
    """Client with a token callback and the fake transport."""

    async def get_token() -> str:
        return "Bearer callback-token"

    return PropertyValidationClient(options, access_token_callback=get_token, transport=transport)


@pytest.fixture
def anonymous_client(
    transport: FakeTransport, options: ClientOptions
) -> PropertyValidationClient:
    """Client without a token callback."""
    return PropertyValidationClient(options, transport=transport)
