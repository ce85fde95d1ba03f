"""Test operations, including starting test runs."""

from __future__ import annotations

import logging
from typing import Any

from ..api.url_formatter import IModelsUrlFormatter, collection_url_params
from ..core.enums import PreferReturn
from ..models import (
    CreateTestRequest,
    MinimalNamedVersion,
    Run,
    RunTestRequest,
    Test,
    TestDetails,
    TestItem,
    UpdateTestRequest,
)
from ..runtime.pagination import EntityListIterator, take
from .base import OperationContext, OperationsBase, parse_entity

logger = logging.getLogger(__name__)


class TestOperations(OperationsBase):
    """Wraps the test endpoints of the Property Validation API."""

    __test__ = False

    def __init__(
        self,
        context: OperationContext,
        *,
        imodels_base_url: str,
        imodels_api_version: str,
    ) -> None:
        super().__init__(context)
        self._imodels_urls = IModelsUrlFormatter(imodels_base_url)
        self._imodels_api_version = imodels_api_version

    def get_list(
        self,
        *,
        project_id: str,
        top: int | None = None,
        continuation_token: str | None = None,
        user_metadata: bool = False,
        access_token: str | None = None,
    ) -> EntityListIterator[TestItem]:
        """Iterate the tests of a project.

        Raises:
            AuthenticationRequiredError: If no credential source is available
        """
        url = self._urls.get_test_list_url(
            collection_url_params(
                project_id=project_id, top=top, continuation_token=continuation_token
            )
        )
        return self._iterate(
            url=url,
            field="tests",
            model=TestItem,
            access_token=access_token,
            user_metadata=user_metadata,
        )

    async def get_single(
        self, *, test_id: str, user_metadata: bool = False, access_token: str | None = None
    ) -> TestDetails:
        """Get a single test in its full representation."""
        response = await self._send_get(
            self._urls.get_single_test_url(test_id),
            access_token=access_token,
            user_metadata=user_metadata,
        )
        return parse_entity(response, "test", TestDetails)

    async def create(
        self,
        *,
        project_id: str,
        display_name: str,
        description: str,
        rules: list[str],
        stop_execution_on_failure: bool = False,
        access_token: str | None = None,
    ) -> Test:
        """Create a test grouping the given rule ids."""
        body = CreateTestRequest(
            project_id=project_id,
            display_name=display_name,
            description=description,
            stop_execution_on_failure=stop_execution_on_failure,
            rules=rules,
        )
        response = await self._send_post(
            self._urls.create_test_url(), body.to_payload(), access_token=access_token
        )
        return parse_entity(response, "test", Test)

    async def update(
        self,
        *,
        test_id: str,
        display_name: str,
        description: str,
        rules: list[str],
        stop_execution_on_failure: bool = False,
        access_token: str | None = None,
    ) -> Test:
        """Replace the editable fields of a test."""
        body = UpdateTestRequest(
            display_name=display_name,
            description=description,
            stop_execution_on_failure=stop_execution_on_failure,
            rules=rules,
        )
        response = await self._send_put(
            self._urls.update_test_url(test_id), body.to_payload(), access_token=access_token
        )
        return parse_entity(response, "test", Test)

    async def run_test(
        self,
        *,
        test_id: str,
        imodel_id: str,
        named_version_id: str | None = None,
        test_settings: dict[str, Any] | None = None,
        access_token: str | None = None,
    ) -> Run | None:
        """Start a run of a test against an iModel named version.

        When ``named_version_id`` is omitted the latest named version of the
        iModel is used.

        Returns:
            The started run, or None if the iModel has no named versions
        """
        self._ensure_access_token_provided(access_token)
        if named_version_id is None:
            latest = await self._get_latest_named_version(imodel_id, access_token=access_token)
            if latest is None:
                logger.warning(
                    "No named versions found, test not run",
                    extra={"imodel_id": imodel_id, "test_id": test_id},
                )
                return None
            named_version_id = latest.id

        body = RunTestRequest(
            test_id=test_id,
            imodel_id=imodel_id,
            named_version_id=named_version_id,
            test_settings=test_settings,
        )
        response = await self._send_post(
            self._urls.run_test_url(), body.to_payload(), access_token=access_token
        )
        return parse_entity(response, "run", Run)

    async def delete(self, *, test_id: str, access_token: str | None = None) -> None:
        """Delete a test."""
        await self._send_delete(self._urls.delete_test_url(test_id), access_token=access_token)

    async def _get_latest_named_version(
        self, imodel_id: str, *, access_token: str | None
    ) -> MinimalNamedVersion | None:
        url = self._imodels_urls.get_named_version_list_url(
            imodel_id, {"$top": 1, "$orderBy": "changesetIndex desc"}
        )
        named_versions = self._iterate(
            url=url,
            field="namedVersions",
            model=MinimalNamedVersion,
            access_token=access_token,
            prefer_return=PreferReturn.MINIMAL,
            api_version=self._imodels_api_version,
        )
        latest = await take(named_versions, 1)
        return latest[0] if latest else None
