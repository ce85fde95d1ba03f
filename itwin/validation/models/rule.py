"""Rule data models."""

from pydantic import Field

from .common import ApiModel, FunctionParameters, Link, SelfLink, UserInfoLinks


class RuleDetailLink(ApiModel):
    """Link to complete rule details."""

    rule: Link


class MinimalRule(ApiModel):
    """Minimal representation of a rule."""

    id: str = Field(..., min_length=1)
    display_name: str
    links: RuleDetailLink | None = Field(default=None, alias="_links")


class RuleDetails(ApiModel):
    """Full representation of a rule."""

    id: str = Field(..., min_length=1)
    display_name: str
    description: str | None = None
    creation_date_time: str | None = None
    modification_date_time: str | None = None
    template_id: str | None = None
    function_parameters: FunctionParameters = Field(default_factory=dict)
    severity: str | None = None
    ec_schema: str | None = None
    ec_class: str | None = None
    where_clause: str | None = None
    function_name: str | None = None
    data_type: str | None = None
    links: UserInfoLinks | None = Field(default=None, alias="_links")


class Rule(ApiModel):
    """Rule returned by create and update."""

    id: str = Field(..., min_length=1)
    display_name: str
    description: str | None = None
    template_id: str | None = None
    function_parameters: FunctionParameters = Field(default_factory=dict)
    severity: str | None = None
    ec_schema: str | None = None
    ec_class: str | None = None
    where_clause: str | None = None
    data_type: str | None = None
    links: SelfLink | None = Field(default=None, alias="_links")


class CreateRuleRequest(ApiModel):
    template_id: str
    display_name: str
    description: str
    ec_class: str
    ec_schema: str
    where_clause: str | None = None
    severity: str
    data_type: str
    function_parameters: FunctionParameters


class UpdateRuleRequest(ApiModel):
    display_name: str
    description: str
    ec_class: str
    ec_schema: str
    where_clause: str | None = None
    severity: str
