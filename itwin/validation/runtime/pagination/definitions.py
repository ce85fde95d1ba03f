"""Pagination data structures.

This module defines the immutable values exchanged by the pagination layer:
the Page produced by one round trip and the CollectionQuery describing what
is being iterated.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.enums import PreferReturn
from ...core.exceptions import ProtocolError

EntityT = TypeVar("EntityT")

EntityAccessor = Callable[[Any], list[EntityT]]


@dataclass(frozen=True)
class Page(Generic[EntityT]):
    """One page of a server-paginated collection.

    Attributes:
        entities: Entities in the order the server returned them
        next_url: Fully formed URL of the next page (None on the last page)
    """

    entities: tuple[EntityT, ...]
    next_url: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_url is None


@dataclass(frozen=True)
class CollectionQuery(Generic[EntityT]):
    """Immutable description of a collection iteration.

    Attributes:
        url: URL of the first page
        entity_accessor: Extracts the entity list from a raw response body
        prefer_return: Minimal/representation hint (None sends no Prefer header)
        user_metadata: Whether to ask for user authorship metadata
        access_token: Explicit token; the client callback is used when absent
        api_version: Accept header version override (None uses the client default)
    """

    url: str
    entity_accessor: EntityAccessor[EntityT]
    prefer_return: PreferReturn | None = None
    user_metadata: bool = False
    access_token: str | None = None
    api_version: str | None = None


def entity_field_accessor(
    field: str, model: type[BaseModel] | None = None
) -> EntityAccessor[Any]:
    """Build an accessor reading the entity array stored under ``field``.

    Args:
        field: Envelope field holding the entity array (e.g. "rules")
        model: Optional pydantic model each item is validated into

    Returns:
        Function mapping a response body to its entity list

    Raises (from the returned accessor):
        ProtocolError: If the field is missing, not a list, or an item fails validation
    """

    def accessor(response: Any) -> list[Any]:
        if not isinstance(response, Mapping) or field not in response:
            raise ProtocolError(f"Collection response is missing the '{field}' array")
        items = response[field]
        if not isinstance(items, list):
            raise ProtocolError(
                f"Collection field '{field}' must be an array, got {type(items).__name__}"
            )
        if model is None:
            return list(items)
        try:
            return [model.model_validate(item) for item in items]
        except PydanticValidationError as e:
            raise ProtocolError(f"Invalid {model.__name__} in '{field}': {e}") from e

    return accessor
