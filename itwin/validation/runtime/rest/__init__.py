"""REST runtime abstractions."""

from .http_client import HTTPClient
from .transport import RESTTransport, Transport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "Transport",
]
