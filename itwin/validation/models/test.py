"""Test and test run data models.

Named ``Test*`` after the service resources; these are not pytest tests.
"""

from typing import Any

from pydantic import Field

from .common import ApiModel, Link, SelfLink


class TestLinks(ApiModel):
    __test__ = False

    created_by: Link | None = None
    last_modified_by: Link | None = None
    test: Link | None = None


class TestItem(ApiModel):
    """Test summary returned by the list operation."""

    __test__ = False

    id: str = Field(..., min_length=1)
    display_name: str
    description: str | None = None
    creation_date_time: str | None = None
    modification_date_time: str | None = None
    links: TestLinks | None = Field(default=None, alias="_links")


class TestDetails(ApiModel):
    """Full representation of a test."""

    __test__ = False

    id: str | None = None
    display_name: str
    description: str | None = None
    creation_date_time: str | None = None
    modification_date_time: str | None = None
    rules: list[str] = Field(default_factory=list)
    stop_execution_on_failure: bool = False
    links: TestLinks | None = Field(default=None, alias="_links")


class Test(ApiModel):
    """Test returned by create and update."""

    __test__ = False

    id: str = Field(..., min_length=1)
    display_name: str
    description: str | None = None
    rules: list[str] = Field(default_factory=list)
    stop_execution_on_failure: bool = False
    links: SelfLink | None = Field(default=None, alias="_links")


class CreateTestRequest(ApiModel):
    __test__ = False

    project_id: str
    display_name: str
    description: str
    stop_execution_on_failure: bool
    rules: list[str]


class UpdateTestRequest(ApiModel):
    __test__ = False

    display_name: str
    description: str
    stop_execution_on_failure: bool
    rules: list[str]


class RunLink(ApiModel):
    run: Link


class Run(ApiModel):
    """Run started by run_test."""

    id: str = Field(..., min_length=1)
    links: RunLink | None = Field(default=None, alias="_links")


class RunTestRequest(ApiModel):
    test_id: str
    imodel_id: str = Field(..., alias="iModelId")
    named_version_id: str
    test_settings: dict[str, Any] | None = None
