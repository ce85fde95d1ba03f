"""Unit tests for PageFetcher and entity accessors."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from itwin.validation.core import (
    AuthenticationRequiredError,
    PreferReturn,
    ProtocolError,
    TransportError,
)
from itwin.validation.runtime.pagination import (
    CollectionQuery,
    PageFetcher,
    entity_field_accessor,
)

URL = "https://api.example.com/items?projectId=p1"
NEXT_URL = "https://api.example.com/items?projectId=p1&continuationToken=abc"


class Item(BaseModel):
    id: str


def make_query(**kwargs) -> CollectionQuery:
    kwargs.setdefault("entity_accessor", entity_field_accessor("items"))
    return CollectionQuery(url=URL, **kwargs)


class TestPageFetcher:
    """Test single page retrieval."""

    @pytest.mark.asyncio
    async def test_reads_entities_and_next_link(self, transport):
        transport.queue(URL, {"items": [1, 2], "_links": {"next": {"href": NEXT_URL}}})
        fetcher = PageFetcher(transport, api_version="v1")

        page = await fetcher.fetch(make_query(access_token="t"), URL)

        assert page.entities == (1, 2)
        assert page.next_url == NEXT_URL
        assert not page.is_last

    @pytest.mark.asyncio
    async def test_missing_next_link_marks_last_page(self, transport):
        transport.queue(URL, {"items": [], "_links": {}}, {"items": [], "_links": {"next": None}})
        fetcher = PageFetcher(transport, api_version="v1")

        assert (await fetcher.fetch(make_query(access_token="t"), URL)).is_last
        assert (await fetcher.fetch(make_query(access_token="t"), URL)).is_last

    @pytest.mark.asyncio
    async def test_headers_with_hints(self, transport):
        transport.queue(URL, {"items": [], "_links": {}})
        fetcher = PageFetcher(transport, api_version="itwin-platform.v1")
        query = make_query(
            access_token="Bearer abc",
            prefer_return=PreferReturn.MINIMAL,
            user_metadata=True,
        )

        await fetcher.fetch(query, URL)

        headers = transport.calls[0]["headers"]
        assert headers == {
            "Authorization": "Bearer abc",
            "Accept": "application/vnd.bentley.itwin-platform.v1+json",
            "Prefer": "return=minimal",
            "Include-User-Metadata": "true",
        }

    @pytest.mark.asyncio
    async def test_headers_without_hints(self, transport):
        transport.queue(URL, {"items": [], "_links": {}})
        fetcher = PageFetcher(transport, api_version="v1")

        await fetcher.fetch(make_query(access_token="raw-token"), URL)

        headers = transport.calls[0]["headers"]
        assert headers["Authorization"] == "Bearer raw-token"
        assert "Prefer" not in headers
        assert "Include-User-Metadata" not in headers

    @pytest.mark.asyncio
    async def test_api_version_override(self, transport):
        transport.queue(URL, {"items": [], "_links": {}})
        fetcher = PageFetcher(transport, api_version="v1")

        await fetcher.fetch(make_query(access_token="t", api_version="v2"), URL)

        assert transport.calls[0]["headers"]["Accept"] == "application/vnd.bentley.v2+json"

    @pytest.mark.asyncio
    async def test_callback_used_when_no_explicit_token(self, transport):
        transport.queue(URL, {"items": [], "_links": {}})
        calls = 0

        async def callback() -> str:
            nonlocal calls
            calls += 1
            return "Bearer from-callback"

        fetcher = PageFetcher(transport, api_version="v1", access_token_callback=callback)
        await fetcher.fetch(make_query(), URL)

        assert calls == 1
        assert transport.calls[0]["headers"]["Authorization"] == "Bearer from-callback"

    @pytest.mark.asyncio
    async def test_explicit_token_wins_over_callback(self, transport):
        transport.queue(URL, {"items": [], "_links": {}})

        async def callback() -> str:
            raise AssertionError("callback must not be called")

        fetcher = PageFetcher(transport, api_version="v1", access_token_callback=callback)
        await fetcher.fetch(make_query(access_token="Bearer explicit"), URL)

        assert transport.calls[0]["headers"]["Authorization"] == "Bearer explicit"

    @pytest.mark.asyncio
    async def test_no_credential_fails_before_transport(self, transport):
        fetcher = PageFetcher(transport, api_version="v1")

        with pytest.raises(AuthenticationRequiredError):
            await fetcher.fetch(make_query(), URL)

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, transport):
        error = TransportError("server error", status_code=500, url=URL)
        transport.queue(URL, error)
        fetcher = PageFetcher(transport, api_version="v1")

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch(make_query(access_token="t"), URL)

        assert exc_info.value is error

    @pytest.mark.parametrize(
        "body",
        [
            None,
            [],
            {"items": []},
            {"items": [], "_links": "nope"},
            {"items": [], "_links": {"next": {"href": ""}}},
            {"items": [], "_links": {"next": "url2"}},
            {"_links": {}},
            {"items": {"a": 1}, "_links": {}},
        ],
    )
    @pytest.mark.asyncio
    async def test_malformed_envelope_is_protocol_error(self, transport, body):
        transport.queue(URL, body)
        fetcher = PageFetcher(transport, api_version="v1")

        with pytest.raises(ProtocolError):
            await fetcher.fetch(make_query(access_token="t"), URL)

    @pytest.mark.asyncio
    async def test_custom_accessor_failure_is_protocol_error(self, transport):
        transport.queue(URL, {"rules": [], "_links": {}})
        fetcher = PageFetcher(transport, api_version="v1")
        query = make_query(access_token="t", entity_accessor=lambda response: response["tests"])

        with pytest.raises(ProtocolError):
            await fetcher.fetch(query, URL)


class TestEntityFieldAccessor:
    """Test accessor construction."""

    def test_validates_items_into_model(self):
        accessor = entity_field_accessor("items", Item)

        items = accessor({"items": [{"id": "a"}, {"id": "b", "extra": 1}]})

        assert [item.id for item in items] == ["a", "b"]

    def test_invalid_item_is_protocol_error(self):
        accessor = entity_field_accessor("items", Item)

        with pytest.raises(ProtocolError, match="Invalid Item"):
            accessor({"items": [{"name": "no id"}]})

    def test_missing_field(self):
        with pytest.raises(ProtocolError, match="'rules'"):
            entity_field_accessor("rules")({"tests": []})
