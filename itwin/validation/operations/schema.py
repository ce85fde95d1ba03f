"""Schema and properties info operations."""

from __future__ import annotations

import warnings

from ..models import PropertiesInfo
from .base import OperationsBase, parse_model


class SchemaOperations(OperationsBase):
    """Wraps the schema/properties endpoints of the Property Validation API."""

    async def get_properties_info(
        self,
        *,
        imodel_id: str,
        project_id: str | None = None,
        filter: str | None = None,
        access_token: str | None = None,
    ) -> PropertiesInfo:
        """Get schema/properties info of an iModel.

        Args:
            imodel_id: iModel id
            project_id: Project id
            filter: Search string narrowing the returned properties
            access_token: Explicit token (defaults to the client callback)
        """
        url = self._urls.get_properties_info_url(
            imodel_id, {"projectId": project_id, "filter": filter}
        )
        response = await self._send_get(url, access_token=access_token)
        return parse_model(response, PropertiesInfo)

    async def extract_schema_info(
        self, *, imodel_id: str, project_id: str, access_token: str | None = None
    ) -> None:
        """Request schema/properties extraction for an iModel.

        Deprecated: the service extracts schema info on demand.
        """
        warnings.warn(
            "extract_schema_info is deprecated; the service extracts schema info on demand",
            DeprecationWarning,
            stacklevel=2,
        )
        await self._send_post(
            self._urls.extract_schema_info_url(imodel_id),
            {"projectId": project_id},
            access_token=access_token,
        )
