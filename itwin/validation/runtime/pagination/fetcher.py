"""Single page retrieval.

PageFetcher performs exactly one round trip for a collection page: resolve
the credential, GET the page, read the continuation link from the envelope,
and extract the entity array with the query's accessor.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import ProtocolError
from ...models.common import CollectionLinks
from ..rest.headers import AccessTokenCallback, form_headers, resolve_access_token
from ..rest.transport import Transport
from .definitions import CollectionQuery, EntityT, Page


class PageFetcher:
    """Fetches collection pages through a Transport.

    Transport errors propagate unchanged; envelope mismatches raise
    ProtocolError. Nothing is retried.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        api_version: str,
        access_token_callback: AccessTokenCallback | None = None,
    ) -> None:
        """Initialize page fetcher.

        Args:
            transport: HTTP collaborator used for the GET
            api_version: Default version for the Accept header
            access_token_callback: Async callback used when a query has no explicit token
        """
        self._transport = transport
        self._api_version = api_version
        self._access_token_callback = access_token_callback

    async def fetch(self, query: CollectionQuery[EntityT], url: str) -> Page[EntityT]:
        """Fetch one page of ``query`` from ``url``.

        Args:
            query: Collection being iterated
            url: Page URL (the query's initial URL or a continuation link)

        Returns:
            Page with the extracted entities and the next page URL, if any

        Raises:
            AuthenticationRequiredError: If no credential can be resolved
            TransportError: From the transport, unmodified
            ProtocolError: If the body is not a collection envelope
        """
        access_token = await resolve_access_token(query.access_token, self._access_token_callback)
        headers = form_headers(
            access_token=access_token,
            api_version=query.api_version or self._api_version,
            prefer_return=query.prefer_return,
            user_metadata=query.user_metadata,
        )
        response = await self._transport.get(url, headers=headers)

        next_url = _read_next_link(response, url)
        try:
            entities = query.entity_accessor(response)
        except ProtocolError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise ProtocolError(f"Cannot extract entities from {url}: {e}", url=url) from e

        return Page(entities=tuple(entities), next_url=next_url)


def _read_next_link(response: Any, url: str) -> str | None:
    """Return ``_links.next.href`` from a collection envelope, if present."""
    if not isinstance(response, Mapping):
        raise ProtocolError(
            f"Expected a JSON object from {url}, got {type(response).__name__}", url=url
        )
    links = response.get("_links")
    if not isinstance(links, Mapping):
        raise ProtocolError(f"Collection response from {url} has no '_links' object", url=url)

    try:
        parsed = CollectionLinks.model_validate(links)
    except PydanticValidationError as e:
        raise ProtocolError(f"Malformed '_links' in response from {url}: {e}", url=url) from e
    return parsed.next.href if parsed.next is not None else None
