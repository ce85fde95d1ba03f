"""Rule operations."""

from __future__ import annotations

from ..api.url_formatter import collection_url_params
from ..core.enums import PreferReturn, RuleDataType, Severity
from ..models import CreateRuleRequest, MinimalRule, Rule, RuleDetails, UpdateRuleRequest
from ..models.common import FunctionParameters
from ..runtime.pagination import EntityListIterator
from .base import OperationsBase, parse_entity


class RuleOperations(OperationsBase):
    """Wraps the rule endpoints of the Property Validation API."""

    def get_minimal_list(
        self,
        *,
        project_id: str,
        top: int | None = None,
        continuation_token: str | None = None,
        access_token: str | None = None,
    ) -> EntityListIterator[MinimalRule]:
        """Iterate the rules of a project in their minimal representation.

        Pages are requested lazily as the iterator is consumed.

        Args:
            project_id: Project whose rules are listed
            top: Page size hint sent as ``$top``
            continuation_token: Resume token from an earlier listing
            access_token: Explicit token (defaults to the client callback)

        Raises:
            AuthenticationRequiredError: If no credential source is available
        """
        url = self._urls.get_rule_list_url(
            collection_url_params(
                project_id=project_id, top=top, continuation_token=continuation_token
            )
        )
        return self._iterate(
            url=url,
            field="rules",
            model=MinimalRule,
            access_token=access_token,
            prefer_return=PreferReturn.MINIMAL,
        )

    def get_representation_list(
        self,
        *,
        project_id: str,
        top: int | None = None,
        continuation_token: str | None = None,
        user_metadata: bool = False,
        access_token: str | None = None,
    ) -> EntityListIterator[RuleDetails]:
        """Iterate the rules of a project in their full representation.

        Args:
            project_id: Project whose rules are listed
            top: Page size hint sent as ``$top``
            continuation_token: Resume token from an earlier listing
            user_metadata: Ask for creator/modifier user info links
            access_token: Explicit token (defaults to the client callback)
        """
        url = self._urls.get_rule_list_url(
            collection_url_params(
                project_id=project_id, top=top, continuation_token=continuation_token
            )
        )
        return self._iterate(
            url=url,
            field="rules",
            model=RuleDetails,
            access_token=access_token,
            prefer_return=PreferReturn.REPRESENTATION,
            user_metadata=user_metadata,
        )

    async def get_single(
        self, *, rule_id: str, user_metadata: bool = False, access_token: str | None = None
    ) -> RuleDetails:
        """Get a single rule in its full representation."""
        response = await self._send_get(
            self._urls.get_single_rule_url(rule_id),
            access_token=access_token,
            user_metadata=user_metadata,
        )
        return parse_entity(response, "rule", RuleDetails)

    async def create(
        self,
        *,
        template_id: str,
        display_name: str,
        description: str,
        ec_class: str,
        ec_schema: str,
        severity: Severity | str,
        data_type: RuleDataType | str,
        function_parameters: FunctionParameters,
        where_clause: str | None = None,
        access_token: str | None = None,
    ) -> Rule:
        """Create a rule from a template."""
        body = CreateRuleRequest(
            template_id=template_id,
            display_name=display_name,
            description=description,
            ec_class=ec_class,
            ec_schema=ec_schema,
            where_clause=where_clause,
            severity=Severity(severity).value,
            data_type=RuleDataType(data_type).value,
            function_parameters=function_parameters,
        )
        response = await self._send_post(
            self._urls.create_rule_url(), body.to_payload(), access_token=access_token
        )
        return parse_entity(response, "rule", Rule)

    async def update(
        self,
        *,
        rule_id: str,
        display_name: str,
        description: str,
        ec_class: str,
        ec_schema: str,
        severity: Severity | str,
        where_clause: str | None = None,
        access_token: str | None = None,
    ) -> Rule:
        """Replace the editable fields of a rule."""
        body = UpdateRuleRequest(
            display_name=display_name,
            description=description,
            ec_class=ec_class,
            ec_schema=ec_schema,
            where_clause=where_clause,
            severity=Severity(severity).value,
        )
        response = await self._send_put(
            self._urls.update_rule_url(rule_id), body.to_payload(), access_token=access_token
        )
        return parse_entity(response, "rule", Rule)

    async def delete(self, *, rule_id: str, access_token: str | None = None) -> None:
        """Delete a rule."""
        await self._send_delete(self._urls.delete_rule_url(rule_id), access_token=access_token)
