"""Run data models."""

from pydantic import Field

from .common import ApiModel, Link


class RunDetailLink(ApiModel):
    run: Link


class RunLinks(ApiModel):
    result: Link | None = None
    test: Link | None = None


class MinimalRun(ApiModel):
    """Minimal representation of a run."""

    id: str = Field(..., min_length=1)
    display_name: str | None = None
    links: RunDetailLink | None = Field(default=None, alias="_links")


class RunDetails(ApiModel):
    """Full representation of a run."""

    id: str = Field(..., min_length=1)
    display_name: str | None = None
    executed_date_time: str | None = None
    count: str | None = None
    status: str | None = None
    result_id: str | None = None
    test_id: str | None = None
    user_name: str | None = None
    links: RunLinks | None = Field(default=None, alias="_links")

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"
