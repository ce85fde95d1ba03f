"""Shared model base and link types."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FunctionParameters = dict[str, Any]


class ApiModel(BaseModel):
    """Base for service payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body (wire names, unset optionals dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Link(ApiModel):
    """Hypermedia link."""

    href: str = Field(..., min_length=1)


class CollectionLinks(ApiModel):
    """``_links`` object of a collection response."""

    next: Link | None = None


class UserInfoLinks(ApiModel):
    """Links to creator and last modifier user info."""

    created_by: Link | None = None
    last_modified_by: Link | None = None


class SelfLink(ApiModel):
    """Link to a created or updated entity."""

    self_: Link | None = Field(default=None, alias="self")
