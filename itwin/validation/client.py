"""Property Validation API client facade.

Architecture:
    PropertyValidationClient wires one Transport, one URL formatter and the
    access token callback into the operation groups (rules, tests, runs,
    templates, results, schema). It owns the transport it creates and closes
    it on exit; an injected transport is left to its owner.

Example:
    >>> async def get_token() -> str:
    ...     return await my_auth.get_access_token()
    >>> async with PropertyValidationClient(access_token_callback=get_token) as client:
    ...     async for rule in client.rules.get_minimal_list(project_id=project_id):
    ...         print(rule.display_name)
"""

from __future__ import annotations

import logging

from .api.url_formatter import ValidationApiUrlFormatter
from .config import ClientOptions
from .operations import (
    OperationContext,
    ResultOperations,
    RuleOperations,
    RunOperations,
    SchemaOperations,
    TemplateOperations,
    TestOperations,
)
from .runtime.rest.headers import AccessTokenCallback
from .runtime.rest.transport import RESTTransport, Transport

logger = logging.getLogger(__name__)


class PropertyValidationClient:
    """Entry point for the Property Validation API."""

    def __init__(
        self,
        options: ClientOptions | None = None,
        access_token_callback: AccessTokenCallback | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            options: Endpoint and timeout options (defaults target the public API)
            access_token_callback: Async callback returning a bearer token, used
                whenever an operation is called without ``access_token``
            transport: Custom transport; by default an aiohttp RESTTransport is created
        """
        self.options = options or ClientOptions()
        self._owns_transport = transport is None
        self._transport: Transport = transport or RESTTransport(timeout=self.options.timeout)

        context = OperationContext(
            transport=self._transport,
            url_formatter=ValidationApiUrlFormatter(self.options.base_url),
            api_version=self.options.api_version,
            access_token_callback=access_token_callback,
        )
        self.rules = RuleOperations(context)
        self.tests = TestOperations(
            context,
            imodels_base_url=self.options.imodels_base_url,
            imodels_api_version=self.options.imodels_api_version,
        )
        self.runs = RunOperations(context)
        self.templates = TemplateOperations(context)
        self.results = ResultOperations(context)
        self.schema = SchemaOperations(context)

        logger.debug(
            "Property validation client created",
            extra={"base_url": self.options.base_url, "api_version": self.options.api_version},
        )

    async def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> PropertyValidationClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
