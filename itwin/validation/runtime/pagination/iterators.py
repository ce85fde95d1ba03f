"""Lazy iteration over server-paginated collections.

EntityPageIterator follows continuation links one page per pull.
EntityListIterator flattens it into a per-entity sequence while still
exposing the page view through by_page(). Both views share one cursor.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Generic

from .definitions import EntityT, Page
from .telemetry import log_iteration_exhausted, log_page_error, log_page_fetched

PageQueryFunc = Callable[[str], Awaitable[Page[EntityT]]]


class EntityPageIterator(Generic[EntityT]):
    """Forward-only async iterator of entity pages.

    Each pull performs exactly one fetch using the link carried by the
    previous page. Once a page without a link has been returned, further
    pulls end the iteration without fetching. Single consumer only.
    """

    def __init__(self, fetch_page: PageQueryFunc[EntityT], url: str) -> None:
        """Initialize page iterator.

        Args:
            fetch_page: Async function fetching the page at a URL
            url: URL of the first page
        """
        self._fetch_page = fetch_page
        self._next_url: str | None = url
        self._pending = False
        self._pages_fetched = 0
        self._entities_fetched = 0

    @property
    def exhausted(self) -> bool:
        return self._next_url is None

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __aiter__(self) -> EntityPageIterator[EntityT]:
        return self

    async def __anext__(self) -> list[EntityT]:
        if self._next_url is None:
            raise StopAsyncIteration
        if self._pending:
            raise RuntimeError("A page request is already in progress on this iterator")

        url = self._next_url
        self._pending = True
        start = perf_counter()
        try:
            page = await self._fetch_page(url)
        except Exception as e:
            log_page_error(
                url=url,
                page_index=self._pages_fetched,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            self._pending = False

        log_page_fetched(
            url=url,
            page_index=self._pages_fetched,
            entity_count=len(page.entities),
            has_next=page.next_url is not None,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        self._pages_fetched += 1
        self._entities_fetched += len(page.entities)
        self._next_url = page.next_url
        if self._next_url is None:
            log_iteration_exhausted(
                pages_fetched=self._pages_fetched, entities_fetched=self._entities_fetched
            )
        return list(page.entities)


class EntityListIterator(Generic[EntityT]):
    """Async iterator yielding the entities of a paginated collection.

    Pages are requested lazily, one at a time, as the buffered page is
    drained. Use by_page() to consume whole pages instead; both views advance
    the same cursor, so do not interleave them on one instance.

    Example:
        >>> async for rule in client.rules.get_minimal_list(project_id=pid):
        ...     print(rule.display_name)
        >>> async for page in client.rules.get_minimal_list(project_id=pid).by_page():
        ...     print(len(page))
    """

    def __init__(self, fetch_page: PageQueryFunc[EntityT], url: str) -> None:
        self._pages: EntityPageIterator[EntityT] = EntityPageIterator(fetch_page, url)
        self._buffer: list[EntityT] = []
        self._index = 0

    def __aiter__(self) -> EntityListIterator[EntityT]:
        return self

    async def __anext__(self) -> EntityT:
        # Empty pages are skipped; StopAsyncIteration from the pages ends iteration
        while self._index >= len(self._buffer):
            self._buffer = await self._pages.__anext__()
            self._index = 0
        entity = self._buffer[self._index]
        self._index += 1
        return entity

    def by_page(self) -> EntityPageIterator[EntityT]:
        """Return the underlying page iterator (same cursor)."""
        return self._pages
