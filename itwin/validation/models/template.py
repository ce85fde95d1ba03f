"""Rule template data model."""

from pydantic import Field

from .common import ApiModel


class RuleTemplate(ApiModel):
    """Template a rule is created from."""

    id: str = Field(..., min_length=1)
    display_name: str
    description: str | None = None
    prompt: str | None = None
