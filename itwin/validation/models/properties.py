"""Properties info and iModel named version models."""

from typing import Any

from pydantic import Field

from .common import ApiModel


class PropertiesSearchResults(ApiModel):
    schemas: list[dict[str, Any]] = Field(default_factory=list)


class PropertiesData(ApiModel):
    search_property: PropertiesSearchResults = Field(default_factory=PropertiesSearchResults)


class PropertiesInfo(ApiModel):
    """Response of the get properties info operation.

    ``status`` is ``available`` once schema extraction for the iModel finished.
    """

    status: str
    data: PropertiesData | None = None

    @property
    def is_available(self) -> bool:
        return self.status == "available"


class MinimalNamedVersion(ApiModel):
    """Named version of an iModel (iModels API)."""

    id: str = Field(..., min_length=1)
    display_name: str | None = None
    changeset_id: str | None = None
    changeset_index: int | None = None
