"""Helpers for consuming async entity iterators."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TypeVar

T = TypeVar("T")


async def take(iterator: AsyncIterator[T], count: int) -> list[T]:
    """Collect at most ``count`` items, pulling no further than needed.

    Works with both EntityListIterator (entities) and by_page() (pages).

    Args:
        iterator: Async iterator to consume
        count: Maximum number of items to collect

    Returns:
        The first min(count, available) items, in order
    """
    items: list[T] = []
    if count <= 0:
        return items
    async for item in iterator:
        items.append(item)
        if len(items) >= count:
            break
    return items


async def to_list(iterator: AsyncIterator[T]) -> list[T]:
    """Drain an async iterator into a list."""
    return [item async for item in iterator]
