"""iTwin Property Validation - async client for the Property Validation API."""

from .client import PropertyValidationClient
from .config import ClientOptions
from .core import (
    AuthenticationRequiredError,
    ConfigurationError,
    PreferReturn,
    ProtocolError,
    RateLimitError,
    RuleDataType,
    Severity,
    TransportError,
    ValidationClientError,
)
from .models import (
    MinimalNamedVersion,
    MinimalRule,
    MinimalRun,
    PropertiesInfo,
    ResultResponse,
    Rule,
    RuleDetails,
    RuleTemplate,
    Run,
    RunDetails,
    Test,
    TestDetails,
    TestItem,
)
from .runtime.pagination import EntityListIterator, EntityPageIterator, take, to_list
from .runtime.rest import RESTTransport, Transport

__version__ = "0.1.0"

__all__ = [
    # Client
    "PropertyValidationClient",
    "ClientOptions",
    # Transport
    "RESTTransport",
    "Transport",
    # Iteration
    "EntityListIterator",
    "EntityPageIterator",
    "take",
    "to_list",
    # Enums
    "PreferReturn",
    "RuleDataType",
    "Severity",
    # Models
    "MinimalNamedVersion",
    "MinimalRule",
    "MinimalRun",
    "PropertiesInfo",
    "ResultResponse",
    "Rule",
    "RuleDetails",
    "RuleTemplate",
    "Run",
    "RunDetails",
    "Test",
    "TestDetails",
    "TestItem",
    # Exceptions
    "ValidationClientError",
    "AuthenticationRequiredError",
    "TransportError",
    "RateLimitError",
    "ProtocolError",
    "ConfigurationError",
]
