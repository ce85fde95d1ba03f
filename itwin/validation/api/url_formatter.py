"""URL construction for Property Validation API endpoints."""

from __future__ import annotations

from collections.abc import Mapping

UrlParameterValue = str | int | float | bool | None


def form_query_string(url_parameters: Mapping[str, UrlParameterValue] | None) -> str:
    """Encode parameters as a query string, skipping empty values.

    A parameter is omitted when its value is None or a blank string.
    Remaining parameters keep the mapping's order. Values are not escaped.

    Examples:
        >>> form_query_string({"projectId": "p1", "$top": None, "filter": ""})
        '?projectId=p1'
        >>> form_query_string({})
        ''
    """
    if not url_parameters:
        return ""
    pairs = [
        f"{key}={_stringify(value)}"
        for key, value in url_parameters.items()
        if _should_append_to_url(value)
    ]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def _should_append_to_url(value: UrlParameterValue) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _stringify(value: UrlParameterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def collection_url_params(
    *,
    project_id: str | None = None,
    top: int | None = None,
    continuation_token: str | None = None,
) -> dict[str, UrlParameterValue]:
    """Build the standard filter/paging parameters of a list request."""
    return {
        "projectId": project_id,
        "$top": top,
        "continuationToken": continuation_token,
    }


class ValidationApiUrlFormatter:
    """Maps operations and their parameters to Property Validation API URLs."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    # Rules
    def get_single_rule_url(self, rule_id: str) -> str:
        return f"{self.base_url}/rules/{rule_id}"

    def get_rule_list_url(self, url_params: Mapping[str, UrlParameterValue] | None = None) -> str:
        return f"{self.base_url}/rules{form_query_string(url_params)}"

    def create_rule_url(self) -> str:
        return f"{self.base_url}/rules"

    def update_rule_url(self, rule_id: str) -> str:
        return f"{self.base_url}/rules/{rule_id}"

    def delete_rule_url(self, rule_id: str) -> str:
        return f"{self.base_url}/rules/{rule_id}"

    # Templates
    def get_template_list_url(
        self, url_params: Mapping[str, UrlParameterValue] | None = None
    ) -> str:
        return f"{self.base_url}/ruleTemplates{form_query_string(url_params)}"

    # Tests
    def get_single_test_url(self, test_id: str) -> str:
        return f"{self.base_url}/tests/{test_id}"

    def get_test_list_url(self, url_params: Mapping[str, UrlParameterValue] | None = None) -> str:
        return f"{self.base_url}/tests{form_query_string(url_params)}"

    def create_test_url(self) -> str:
        return f"{self.base_url}/tests"

    def update_test_url(self, test_id: str) -> str:
        return f"{self.base_url}/tests/{test_id}"

    def delete_test_url(self, test_id: str) -> str:
        return f"{self.base_url}/tests/{test_id}"

    # Runs
    def get_single_run_url(self, run_id: str) -> str:
        return f"{self.base_url}/runs/{run_id}"

    def get_run_list_url(self, url_params: Mapping[str, UrlParameterValue] | None = None) -> str:
        return f"{self.base_url}/runs{form_query_string(url_params)}"

    def run_test_url(self) -> str:
        return f"{self.base_url}/runs"

    def delete_run_url(self, run_id: str) -> str:
        return f"{self.base_url}/runs/{run_id}"

    # Results and schema
    def get_result_url(self, result_id: str) -> str:
        return f"{self.base_url}/results/{result_id}"

    def get_properties_info_url(
        self, imodel_id: str, url_params: Mapping[str, UrlParameterValue] | None = None
    ) -> str:
        return f"{self.base_url}/properties/imodels/{imodel_id}{form_query_string(url_params)}"

    def extract_schema_info_url(self, imodel_id: str) -> str:
        return f"{self.base_url}/schema/imodels/{imodel_id}"


class IModelsUrlFormatter:
    """URLs of the iModels API used for named version lookup."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def get_named_version_list_url(
        self, imodel_id: str, url_params: Mapping[str, UrlParameterValue] | None = None
    ) -> str:
        return f"{self.base_url}/{imodel_id}/namedversions{form_query_string(url_params)}"
