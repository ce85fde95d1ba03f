"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ...core.exceptions import ProtocolError, RateLimitError, TransportError

logger = logging.getLogger(__name__)

_DEFAULT_RETRY_AFTER = 60


class HTTPClient:
    """Async HTTP client wrapper.

    Maps aiohttp failures and non-2xx statuses onto TransportError and
    returns parsed JSON bodies (None for empty bodies).
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self, url: str, json: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        """POST request."""
        return await self.request("POST", url, json=json, headers=headers)

    async def put(
        self, url: str, json: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        """PUT request."""
        return await self.request("PUT", url, json=json, headers=headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and decode the JSON response body.

        Raises:
            RateLimitError: On HTTP 429
            TransportError: On network failure or any other non-2xx status
            ProtocolError: If a 2xx body is not valid UTF-8 JSON
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        logger.debug("http_request", extra={"method": method, "url": url})
        try:
            async with self.session.request(method, url, json=json, headers=headers) as response:
                logger.debug(
                    "http_response",
                    extra={"method": method, "url": url, "status": response.status},
                )
                if response.status == 429:
                    raise RateLimitError(
                        f"{method} {url} was rate limited",
                        retry_after=_parse_retry_after(response.headers.get("Retry-After")),
                        url=url,
                    )
                if response.status >= 400:
                    detail = await response.text(errors="replace")
                    raise TransportError(
                        f"{method} {url} failed with status {response.status}: {detail[:500]}",
                        status_code=response.status,
                        url=url,
                    )
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e!r}", url=url) from e

        return _decode_body(body, url)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode_body(body: bytes, url: str) -> Any:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProtocolError(f"Response from {url} is not valid UTF-8", url=url) from e
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        raise ProtocolError(f"Response from {url} is not valid JSON", url=url) from e


def _parse_retry_after(value: str | None) -> int:
    if value is None:
        return _DEFAULT_RETRY_AFTER
    try:
        return max(int(value), 0)
    except ValueError:
        return _DEFAULT_RETRY_AFTER
