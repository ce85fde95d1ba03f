"""Rule template operations."""

from __future__ import annotations

from ..api.url_formatter import collection_url_params
from ..models import RuleTemplate
from ..runtime.pagination import EntityListIterator
from .base import OperationsBase


class TemplateOperations(OperationsBase):
    """Wraps the rule template endpoint of the Property Validation API."""

    def get_list(
        self,
        *,
        project_id: str | None = None,
        top: int | None = None,
        continuation_token: str | None = None,
        access_token: str | None = None,
    ) -> EntityListIterator[RuleTemplate]:
        """Iterate the rule templates available to a project.

        Combine with take() to probe for the first few templates without
        fetching the whole collection.
        """
        url = self._urls.get_template_list_url(
            collection_url_params(
                project_id=project_id, top=top, continuation_token=continuation_token
            )
        )
        return self._iterate(
            url=url,
            field="ruleTemplates",
            model=RuleTemplate,
            access_token=access_token,
        )
