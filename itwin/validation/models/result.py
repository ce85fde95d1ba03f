"""Result data models."""

from pydantic import Field

from .common import ApiModel


class ResultDetails(ApiModel):
    """A single element that failed a rule."""

    element_id: str
    element_label: str | None = None
    rule_index: str
    bad_value: str | None = None


class ResultRule(ApiModel):
    """Rule referenced by ``ResultDetails.rule_index``."""

    id: str
    display_name: str | None = None


class ResultResponse(ApiModel):
    """Response of the get result operation."""

    result: list[ResultDetails] = Field(default_factory=list)
    rule_list: list[ResultRule] = Field(default_factory=list)

    def rule_for(self, detail: ResultDetails) -> ResultRule | None:
        """Resolve the rule a result entry refers to."""
        try:
            index = int(detail.rule_index)
        except ValueError:
            return None
        if not 0 <= index < len(self.rule_list):
            return None
        return self.rule_list[index]
