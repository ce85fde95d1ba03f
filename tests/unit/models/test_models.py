"""Unit tests for payload models."""

import pytest
from pydantic import ValidationError

from itwin.validation import models


class TestRuleModels:
    def test_minimal_rule_from_wire(self):
        rule = models.MinimalRule.model_validate(
            {
                "id": "r1",
                "displayName": "Rule one",
                "_links": {"rule": {"href": "https://api.example.com/rules/r1"}},
            }
        )

        assert rule.display_name == "Rule one"
        assert rule.links.rule.href == "https://api.example.com/rules/r1"

    def test_rule_details_defaults(self):
        rule = models.RuleDetails.model_validate(
            {"id": "r1", "displayName": "Rule", "ecClass": "Wall", "unknownField": 1}
        )

        assert rule.ec_class == "Wall"
        assert rule.function_parameters == {}
        assert rule.links is None

    def test_models_are_frozen(self):
        rule = models.MinimalRule(id="r1", display_name="Rule")

        with pytest.raises(ValidationError):
            rule.display_name = "changed"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            models.MinimalRule.model_validate({"id": "", "displayName": "x"})

    def test_create_request_payload(self):
        request = models.CreateRuleRequest(
            template_id="tpl",
            display_name="Rule",
            description="desc",
            ec_class="Wall",
            ec_schema="Arch",
            severity="high",
            data_type="property",
            function_parameters={"lowerBound": "1"},
        )

        payload = request.to_payload()

        assert payload == {
            "templateId": "tpl",
            "displayName": "Rule",
            "description": "desc",
            "ecClass": "Wall",
            "ecSchema": "Arch",
            "severity": "high",
            "dataType": "property",
            "functionParameters": {"lowerBound": "1"},
        }

    def test_self_link(self):
        rule = models.Rule.model_validate(
            {"id": "r1", "displayName": "R", "_links": {"self": {"href": "https://x/r1"}}}
        )

        assert rule.links.self_.href == "https://x/r1"


class TestTestModels:
    def test_run_test_request_payload(self):
        request = models.RunTestRequest(test_id="t1", imodel_id="m1", named_version_id="nv1")

        assert request.to_payload() == {
            "testId": "t1",
            "iModelId": "m1",
            "namedVersionId": "nv1",
        }

    def test_test_details(self):
        details = models.TestDetails.model_validate(
            {"displayName": "T", "rules": ["r1", "r2"], "stopExecutionOnFailure": True}
        )

        assert details.rules == ["r1", "r2"]
        assert details.stop_execution_on_failure is True


class TestRunAndResultModels:
    def test_run_details_completed(self):
        run = models.RunDetails.model_validate(
            {"id": "x", "status": "completed", "resultId": "res"}
        )

        assert run.is_completed
        assert run.result_id == "res"
        assert not models.RunDetails(id="y", status="queued").is_completed

    def test_result_rule_lookup(self):
        response = models.ResultResponse.model_validate(
            {
                "result": [
                    {"elementId": "0x1", "ruleIndex": "1", "badValue": "3"},
                    {"elementId": "0x2", "ruleIndex": "7"},
                ],
                "ruleList": [{"id": "ra"}, {"id": "rb"}],
            }
        )

        assert response.rule_for(response.result[0]).id == "rb"
        assert response.rule_for(response.result[1]) is None

    def test_result_rule_lookup_rejects_negative_and_malformed_index(self):
        response = models.ResultResponse.model_validate(
            {
                "result": [
                    {"elementId": "0x1", "ruleIndex": "-1"},
                    {"elementId": "0x2", "ruleIndex": "first"},
                ],
                "ruleList": [{"id": "ra"}, {"id": "rb"}],
            }
        )

        assert response.rule_for(response.result[0]) is None
        assert response.rule_for(response.result[1]) is None

    def test_properties_info(self):
        info = models.PropertiesInfo.model_validate(
            {"status": "available", "data": {"searchProperty": {"schemas": [{"name": "S"}]}}}
        )

        assert info.is_available
        assert info.data.search_property.schemas == [{"name": "S"}]

    def test_collection_links(self):
        links = models.CollectionLinks.model_validate({"next": {"href": "https://x?c=1"}})

        assert links.next.href == "https://x?c=1"
        assert models.CollectionLinks.model_validate({}).next is None
