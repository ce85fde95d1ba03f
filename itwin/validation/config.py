"""Service endpoints, header names and client options.

This module centralizes the URLs, API versions and header names used by the
operations so the client facade can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.bentley.com/validation/propertyValue"
DEFAULT_API_VERSION = "itwin-platform.v1"

# Named version lookup for runs started without an explicit version
IMODELS_BASE_URL = "https://api.bentley.com/imodels"
IMODELS_API_VERSION = "itwin-platform.v2"

DEFAULT_TIMEOUT = 30.0

HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_PREFER = "Prefer"
HEADER_USER_METADATA = "Include-User-Metadata"

CONTENT_TYPE_JSON = "application/json"
BEARER_PREFIX = "Bearer "


def accept_header(api_version: str) -> str:
    """Build the API-version-qualified Accept header value.

    Examples:
        >>> accept_header("itwin-platform.v1")
        'application/vnd.bentley.itwin-platform.v1+json'
    """
    return f"application/vnd.bentley.{api_version}+json"


@dataclass(frozen=True)
class ClientOptions:
    """Options for PropertyValidationClient.

    Attributes:
        base_url: Property Validation API root (no trailing slash)
        api_version: Version used in the Accept header
        imodels_base_url: iModels API root used for named version lookup
        imodels_api_version: Version used in the Accept header for iModels calls
        timeout: Total request timeout in seconds
    """

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    imodels_base_url: str = IMODELS_BASE_URL
    imodels_api_version: str = IMODELS_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate option values."""
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("base_url must be a non-empty URL")
        if not self.imodels_base_url or not self.imodels_base_url.strip():
            raise ConfigurationError("imodels_base_url must be a non-empty URL")
        if not self.api_version or not self.imodels_api_version:
            raise ConfigurationError("API versions must be non-empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        # Paths are appended with a leading slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "imodels_base_url", self.imodels_base_url.rstrip("/"))
