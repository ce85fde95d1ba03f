"""Run operations."""

from __future__ import annotations

from ..api.url_formatter import collection_url_params
from ..core.enums import PreferReturn
from ..models import MinimalRun, RunDetails
from ..runtime.pagination import EntityListIterator
from .base import OperationsBase, parse_entity


class RunOperations(OperationsBase):
    """Wraps the run endpoints of the Property Validation API."""

    def get_minimal_list(
        self,
        *,
        project_id: str,
        top: int | None = None,
        continuation_token: str | None = None,
        access_token: str | None = None,
    ) -> EntityListIterator[MinimalRun]:
        """Iterate the runs of a project in their minimal representation."""
        return self._iterate(
            url=self._list_url(project_id, top, continuation_token),
            field="runs",
            model=MinimalRun,
            access_token=access_token,
            prefer_return=PreferReturn.MINIMAL,
        )

    def get_representation_list(
        self,
        *,
        project_id: str,
        top: int | None = None,
        continuation_token: str | None = None,
        access_token: str | None = None,
    ) -> EntityListIterator[RunDetails]:
        """Iterate the runs of a project in their full representation."""
        return self._iterate(
            url=self._list_url(project_id, top, continuation_token),
            field="runs",
            model=RunDetails,
            access_token=access_token,
            prefer_return=PreferReturn.REPRESENTATION,
        )

    async def get_single(self, *, run_id: str, access_token: str | None = None) -> RunDetails:
        response = await self._send_get(
            self._urls.get_single_run_url(run_id), access_token=access_token
        )
        return parse_entity(response, "run", RunDetails)

    async def delete(self, *, run_id: str, access_token: str | None = None) -> None:
        await self._send_delete(self._urls.delete_run_url(run_id), access_token=access_token)

    def _list_url(self, project_id: str, top: int | None, continuation_token: str | None) -> str:
        return self._urls.get_run_list_url(
            collection_url_params(
                project_id=project_id, top=top, continuation_token=continuation_token
            )
        )
