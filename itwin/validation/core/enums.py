"""Enumerations shared across operations and models."""

from __future__ import annotations

from enum import Enum


class PreferReturn(str, Enum):
    """Representation hint sent in the ``Prefer`` header of list requests."""

    MINIMAL = "minimal"
    REPRESENTATION = "representation"

    def header_value(self) -> str:
        return f"return={self.value}"


class Severity(str, Enum):
    """Rule severity levels accepted by the service."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class RuleDataType(str, Enum):
    """Kind of data a rule is evaluated against."""

    PROPERTY = "property"
    ASPECT = "aspect"
    TYPE_DEFINITION = "typeDefinition"
