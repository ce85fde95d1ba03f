"""Data models for Property Validation API payloads.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True). Fields are snake_case in Python and
    camelCase on the wire; ``_links`` objects are exposed as ``links``.

Model Categories:
    - Rules: MinimalRule, RuleDetails, Rule
    - Tests: TestItem, TestDetails, Test, Run
    - Runs: MinimalRun, RunDetails
    - Templates: RuleTemplate
    - Results: ResultResponse, ResultDetails, ResultRule
    - Schema: PropertiesInfo, MinimalNamedVersion
"""

from .common import ApiModel, CollectionLinks, FunctionParameters, Link, SelfLink, UserInfoLinks
from .properties import (
    MinimalNamedVersion,
    PropertiesData,
    PropertiesInfo,
    PropertiesSearchResults,
)
from .result import ResultDetails, ResultResponse, ResultRule
from .rule import CreateRuleRequest, MinimalRule, Rule, RuleDetailLink, RuleDetails, UpdateRuleRequest
from .run import MinimalRun, RunDetailLink, RunDetails, RunLinks
from .template import RuleTemplate
from .test import (
    CreateTestRequest,
    Run,
    RunLink,
    RunTestRequest,
    Test,
    TestDetails,
    TestItem,
    TestLinks,
    UpdateTestRequest,
)

__all__ = [
    "ApiModel",
    "CollectionLinks",
    "FunctionParameters",
    "Link",
    "SelfLink",
    "UserInfoLinks",
    "MinimalRule",
    "RuleDetails",
    "RuleDetailLink",
    "Rule",
    "CreateRuleRequest",
    "UpdateRuleRequest",
    "TestItem",
    "TestDetails",
    "TestLinks",
    "Test",
    "CreateTestRequest",
    "UpdateTestRequest",
    "Run",
    "RunLink",
    "RunTestRequest",
    "MinimalRun",
    "RunDetails",
    "RunDetailLink",
    "RunLinks",
    "RuleTemplate",
    "ResultDetails",
    "ResultResponse",
    "ResultRule",
    "PropertiesInfo",
    "PropertiesData",
    "PropertiesSearchResults",
    "MinimalNamedVersion",
]
