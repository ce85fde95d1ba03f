"""REST transport abstraction.

The operations only talk to a Transport: something that issues an
authenticated GET/POST/PUT/DELETE for a URL and headers and returns the parsed
JSON body. RESTTransport is the aiohttp-backed implementation; tests and
alternate HTTP stacks can supply any object with the same shape.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .http_client import HTTPClient


@runtime_checkable
class Transport(Protocol):
    """Structural interface for the HTTP collaborator."""

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any: ...

    async def post(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any: ...

    async def put(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any: ...

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> Any: ...

    async def close(self) -> None: ...


class RESTTransport:
    """Thin delegation layer over HTTPClient."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return await self._http.get(url, headers=headers)

    async def post(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self._http.post(url, json=json_body, headers=headers)

    async def put(
        self, url: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self._http.put(url, json=json_body, headers=headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return await self._http.delete(url, headers=headers)

    async def close(self) -> None:
        await self._http.close()
