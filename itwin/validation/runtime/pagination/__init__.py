"""Lazy iteration over server-paginated entity collections.

Architecture:
    - definitions.py: Page and CollectionQuery values, entity accessors
    - fetcher.py: PageFetcher, one authenticated round trip per page
    - iterators.py: EntityPageIterator (pages) and EntityListIterator (entities)
    - utils.py: take() and to_list() consumers
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import CollectionQuery, EntityAccessor, Page, entity_field_accessor
from .fetcher import PageFetcher
from .iterators import EntityListIterator, EntityPageIterator
from .utils import take, to_list

__all__ = [
    "CollectionQuery",
    "EntityAccessor",
    "Page",
    "entity_field_accessor",
    "PageFetcher",
    "EntityListIterator",
    "EntityPageIterator",
    "take",
    "to_list",
]
