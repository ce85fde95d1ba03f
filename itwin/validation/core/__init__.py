"""Core components."""

from .enums import PreferReturn, RuleDataType, Severity
from .exceptions import (
    AuthenticationRequiredError,
    ConfigurationError,
    ProtocolError,
    RateLimitError,
    TransportError,
    ValidationClientError,
)

__all__ = [
    "PreferReturn",
    "RuleDataType",
    "Severity",
    "ValidationClientError",
    "AuthenticationRequiredError",
    "TransportError",
    "RateLimitError",
    "ProtocolError",
    "ConfigurationError",
]
