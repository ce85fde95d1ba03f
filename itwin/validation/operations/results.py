"""Result operations."""

from __future__ import annotations

from ..models import ResultResponse
from .base import OperationsBase, parse_model


class ResultOperations(OperationsBase):
    """Wraps the result endpoint of the Property Validation API."""

    async def get(self, *, result_id: str, access_token: str | None = None) -> ResultResponse:
        """Get the elements that failed the rules of a completed run.

        Args:
            result_id: Result id (``RunDetails.result_id``)
            access_token: Explicit token (defaults to the client callback)
        """
        response = await self._send_get(
            self._urls.get_result_url(result_id), access_token=access_token
        )
        return parse_model(response, ResultResponse)
