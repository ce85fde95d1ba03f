"""Shared request plumbing for operation groups.

Architecture:
    OperationsBase owns the collaborators every operation needs: the
    Transport, the URL formatter, the API version and the optional access
    token callback. It provides send helpers for single-resource requests and
    builds EntityListIterator instances for collection requests.

Design Decisions:
    - Credentials are checked when an operation is called, so a missing token
      fails before any iterator or request exists
    - Each list call builds a fresh CollectionQuery and iterator graph
    - Response bodies are validated into pydantic models; shape mismatches
      surface as ProtocolError
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..api.url_formatter import ValidationApiUrlFormatter
from ..core.enums import PreferReturn
from ..core.exceptions import ProtocolError
from ..runtime.pagination import (
    CollectionQuery,
    EntityListIterator,
    PageFetcher,
    entity_field_accessor,
)
from ..runtime.rest.headers import (
    AccessTokenCallback,
    ensure_access_token_provided,
    form_headers,
    resolve_access_token,
)
from ..runtime.rest.transport import Transport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class OperationContext:
    """Collaborators shared by all operation groups of one client."""

    transport: Transport
    url_formatter: ValidationApiUrlFormatter
    api_version: str
    access_token_callback: AccessTokenCallback | None = None


class OperationsBase:
    """Base class for operation groups (rules, tests, runs, ...)."""

    def __init__(self, context: OperationContext) -> None:
        self._context = context
        self._transport = context.transport
        self._urls = context.url_formatter
        self._page_fetcher = PageFetcher(
            context.transport,
            api_version=context.api_version,
            access_token_callback=context.access_token_callback,
        )

    def _ensure_access_token_provided(self, access_token: str | None) -> None:
        ensure_access_token_provided(access_token, self._context.access_token_callback)

    async def _headers(
        self,
        access_token: str | None,
        *,
        prefer_return: PreferReturn | None = None,
        user_metadata: bool = False,
        contains_body: bool = False,
    ) -> dict[str, str]:
        token = await resolve_access_token(access_token, self._context.access_token_callback)
        return form_headers(
            access_token=token,
            api_version=self._context.api_version,
            prefer_return=prefer_return,
            user_metadata=user_metadata,
            contains_body=contains_body,
        )

    async def _send_get(
        self,
        url: str,
        *,
        access_token: str | None = None,
        prefer_return: PreferReturn | None = None,
        user_metadata: bool = False,
    ) -> Any:
        self._ensure_access_token_provided(access_token)
        headers = await self._headers(
            access_token, prefer_return=prefer_return, user_metadata=user_metadata
        )
        return await self._transport.get(url, headers=headers)

    async def _send_post(self, url: str, body: Any, *, access_token: str | None = None) -> Any:
        self._ensure_access_token_provided(access_token)
        headers = await self._headers(access_token, contains_body=True)
        return await self._transport.post(url, json_body=body, headers=headers)

    async def _send_put(self, url: str, body: Any, *, access_token: str | None = None) -> Any:
        self._ensure_access_token_provided(access_token)
        headers = await self._headers(access_token, contains_body=True)
        return await self._transport.put(url, json_body=body, headers=headers)

    async def _send_delete(self, url: str, *, access_token: str | None = None) -> None:
        self._ensure_access_token_provided(access_token)
        headers = await self._headers(access_token)
        await self._transport.delete(url, headers=headers)

    def _iterate(
        self,
        *,
        url: str,
        field: str,
        model: type[ModelT],
        access_token: str | None = None,
        prefer_return: PreferReturn | None = None,
        user_metadata: bool = False,
        api_version: str | None = None,
    ) -> EntityListIterator[ModelT]:
        """Build a lazy iterator over the collection at ``url``.

        Raises:
            AuthenticationRequiredError: If no credential source is available
        """
        self._ensure_access_token_provided(access_token)
        query: CollectionQuery[ModelT] = CollectionQuery(
            url=url,
            entity_accessor=entity_field_accessor(field, model),
            prefer_return=prefer_return,
            user_metadata=user_metadata,
            access_token=access_token,
            api_version=api_version,
        )
        logger.debug("Collection iteration created", extra={"url": url, "field": field})
        return EntityListIterator(partial(self._page_fetcher.fetch, query), query.url)


def parse_entity(response: Any, field: str, model: type[ModelT]) -> ModelT:
    """Validate ``response[field]`` into ``model``.

    Raises:
        ProtocolError: If the field is missing or fails validation
    """
    if not isinstance(response, Mapping) or field not in response:
        raise ProtocolError(f"Response is missing the '{field}' object")
    return parse_model(response[field], model)


def parse_model(payload: Any, model: type[ModelT]) -> ModelT:
    """Validate a whole payload into ``model``, mapping failures to ProtocolError."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ProtocolError(f"Invalid {model.__name__} payload: {e}") from e
