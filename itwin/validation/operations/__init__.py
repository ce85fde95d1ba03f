"""Operation groups exposed by PropertyValidationClient."""

from .base import OperationContext, OperationsBase
from .results import ResultOperations
from .rules import RuleOperations
from .runs import RunOperations
from .schema import SchemaOperations
from .templates import TemplateOperations
from .tests import TestOperations

__all__ = [
    "OperationContext",
    "OperationsBase",
    "ResultOperations",
    "RuleOperations",
    "RunOperations",
    "SchemaOperations",
    "TemplateOperations",
    "TestOperations",
]
